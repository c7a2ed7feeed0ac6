"""Pytest configuration and fixtures."""
import io
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import structlog

from cloudconfig.core.config import Settings
from cloudconfig.wizard.builder import InteractiveConfigBuilder
from tests.helpers import answers


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop any structlog configuration a test installed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    """Isolated home directory."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def test_settings(home_dir: Path) -> Settings:
    """Test settings with an injected home directory."""
    return Settings(
        home_dir=home_dir,
        home_shortcuts=["~/"],
        log_level="DEBUG",
        _env_file=None,
    )


@pytest.fixture
def make_builder(
    test_settings: Settings,
) -> Callable[..., tuple[InteractiveConfigBuilder, io.StringIO]]:
    """Factory for a builder fed with scripted answers."""

    def _make(*lines: str) -> tuple[InteractiveConfigBuilder, io.StringIO]:
        output = io.StringIO()
        return InteractiveConfigBuilder(answers(*lines), output, test_settings), output

    return _make
