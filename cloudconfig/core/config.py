"""Application configuration via Pydantic Settings."""
import sys
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cloudconfig.core.exceptions import CurrentUserError

META_CONFIG_FILENAME = ".cloudconfig.meta"
DEFAULT_CONFIG_FILENAME = ".cloudconfig"
DEFAULT_PRIVATE_KEY = Path(".ssh") / "cloudconfigkey"

# %userprofile% is the traditional windows home shortcut, powershell also allows ~/
PLATFORM_HOME_SHORTCUTS: dict[str, tuple[str, ...]] = {
    "win32": ("%userprofile%", "~/"),
}
DEFAULT_HOME_SHORTCUTS: tuple[str, ...] = ("~/",)


def resolve_home_dir() -> Path:
    """Resolve the current user's home directory.

    Raises:
        CurrentUserError: If the home directory cannot be determined
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise CurrentUserError(
            "Could not determine the current user's home directory",
            details={"error": str(e)},
        ) from e

    # Python < 3.12 returns an unexpanded "~" instead of raising
    if home == Path("~") or not home.is_absolute():
        raise CurrentUserError(
            "Could not determine the current user's home directory",
            details={"home": str(home)},
        )
    return home


def default_home_shortcuts(platform: str | None = None) -> list[str]:
    """Home shortcut rules for a platform, in match order."""
    platform = platform or sys.platform
    return list(PLATFORM_HOME_SHORTCUTS.get(platform, DEFAULT_HOME_SHORTCUTS))


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="CLOUDCONFIG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_format: Literal["console", "json"] = "console"

    # User
    home_dir: Path = Field(default_factory=resolve_home_dir)
    home_shortcuts: list[str] = Field(default_factory=lambda: default_home_shortcuts())

    # Session
    collect_encryption: bool = False
    max_prompt_attempts: int | None = Field(default=None, ge=1)  # None = unbounded

    @field_validator("home_dir", mode="before")
    @classmethod
    def ensure_path(cls, v: str | Path) -> Path:
        """Convert string to Path."""
        return Path(v)

    @property
    def meta_config_path(self) -> Path:
        """Path of the persisted meta config."""
        return self.home_dir / META_CONFIG_FILENAME

    @property
    def default_config_path(self) -> Path:
        """Config path used when the operator gives none."""
        return self.home_dir / DEFAULT_CONFIG_FILENAME

    @property
    def default_private_key_path(self) -> Path:
        """Key location used when the operator gives none."""
        return self.home_dir / DEFAULT_PRIVATE_KEY


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
