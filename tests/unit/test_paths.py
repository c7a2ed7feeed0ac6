"""Tests for config path validation and home shortcuts."""
import os
from pathlib import Path

import pytest

from cloudconfig.core.config import default_home_shortcuts
from cloudconfig.wizard.paths import HomeShortcuts, is_valid_local_path, is_valid_s3_path


class TestHomeShortcuts:
    """Tests for HomeShortcuts."""

    def test_expand_tilde(self, home_dir: Path) -> None:
        """Test ~/ expands to the home directory."""
        shortcuts = HomeShortcuts(home_dir, ["~/"])
        assert shortcuts.expand("~/foo.cfg") == f"{home_dir}{os.sep}foo.cfg"

    def test_only_leading_shortcut_expanded(self, home_dir: Path) -> None:
        """Test shortcuts in the middle of a path are left alone."""
        shortcuts = HomeShortcuts(home_dir, ["~/"])
        assert shortcuts.expand("/tmp/~/foo") == "/tmp/~/foo"

    def test_no_shortcut(self, home_dir: Path) -> None:
        """Test plain paths are returned unchanged."""
        shortcuts = HomeShortcuts(home_dir, ["~/"])
        assert shortcuts.expand("/etc/cloudconfig") == "/etc/cloudconfig"

    def test_windows_rules(self, home_dir: Path) -> None:
        """Test the windows table also expands %userprofile%."""
        shortcuts = HomeShortcuts(home_dir, default_home_shortcuts("win32"))
        assert shortcuts.expand("%userprofile%cfg") == f"{home_dir}{os.sep}cfg"
        assert shortcuts.expand("~/cfg") == f"{home_dir}{os.sep}cfg"

    def test_platform_table(self) -> None:
        """Test non-windows platforms only know ~/."""
        assert default_home_shortcuts("linux") == ["~/"]
        assert default_home_shortcuts("darwin") == ["~/"]
        assert default_home_shortcuts("win32") == ["%userprofile%", "~/"]


class TestLocalPathValidation:
    """Tests for is_valid_local_path."""

    @pytest.fixture
    def shortcuts(self, home_dir: Path) -> HomeShortcuts:
        return HomeShortcuts(home_dir, ["~/"])

    def test_empty_is_valid(self, shortcuts: HomeShortcuts) -> None:
        """Test empty input means the default path."""
        assert is_valid_local_path("", shortcuts) is True

    def test_existing_file_untouched(self, tmp_path: Path, shortcuts: HomeShortcuts) -> None:
        """Test an existing file is accepted without being modified."""
        existing = tmp_path / "existing.cfg"
        existing.write_text("keep me")
        mtime = existing.stat().st_mtime_ns

        assert is_valid_local_path(str(existing), shortcuts) is True
        assert existing.read_text() == "keep me"
        assert existing.stat().st_mtime_ns == mtime

    def test_writable_directory_probed(self, tmp_path: Path, shortcuts: HomeShortcuts) -> None:
        """Test a new file in a writable directory is accepted and cleaned up."""
        candidate = tmp_path / "new.cfg"

        assert is_valid_local_path(str(candidate), shortcuts) is True
        assert not candidate.exists()

    def test_missing_directory_rejected(self, tmp_path: Path, shortcuts: HomeShortcuts) -> None:
        """Test a path under a non-existent directory is rejected."""
        candidate = tmp_path / "missing" / "new.cfg"

        assert is_valid_local_path(str(candidate), shortcuts) is False
        assert not candidate.parent.exists()

    def test_null_byte_rejected(self, tmp_path: Path, shortcuts: HomeShortcuts) -> None:
        """Test a path with an embedded NUL is rejected instead of raising."""
        assert is_valid_local_path(str(tmp_path / "a\x00b"), shortcuts) is False

    def test_shortcut_expanded_before_probe(self, home_dir: Path, shortcuts: HomeShortcuts) -> None:
        """Test ~/ paths are probed inside the home directory."""
        (home_dir / "present.cfg").write_text("")

        assert is_valid_local_path("~/present.cfg", shortcuts) is True
        assert is_valid_local_path("~/nowhere/new.cfg", shortcuts) is False


class TestS3PathValidation:
    """Tests for is_valid_s3_path."""

    def test_s3_uri_accepted(self) -> None:
        """Test s3:// URIs are accepted."""
        assert is_valid_s3_path("s3://bucket/key") is True

    @pytest.mark.parametrize("path", ["bucket/key", "", "S3://bucket/key", "s3:/bucket"])
    def test_other_rejected(self, path: str) -> None:
        """Test anything without the s3:// prefix is rejected."""
        assert is_valid_s3_path(path) is False
