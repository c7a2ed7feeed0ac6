"""Config path validation and home-directory shortcut expansion."""
import os
from collections.abc import Sequence
from pathlib import Path

from cloudconfig.core.logging import get_logger

logger = get_logger(__name__)

S3_SCHEME = "s3://"


class HomeShortcuts:
    """Ordered shortcut rules that expand to the user's home directory.

    Example:
        shortcuts = HomeShortcuts(Path("/home/ada"), ["~/"])
        shortcuts.expand("~/foo.cfg")  # "/home/ada/foo.cfg"
    """

    def __init__(self, home_dir: Path, shortcuts: Sequence[str]) -> None:
        self.home_dir = home_dir
        self.shortcuts = tuple(shortcuts)

    @property
    def expansion(self) -> str:
        """Text every shortcut expands to."""
        return str(self.home_dir) + os.sep

    def match(self, path: str) -> str | None:
        """Return the first shortcut that prefixes path."""
        for shortcut in self.shortcuts:
            if path.startswith(shortcut):
                return shortcut
        return None

    def expand(self, path: str) -> str:
        """Replace a leading shortcut with the home directory."""
        shortcut = self.match(path)
        if shortcut is None:
            return path
        return self.expansion + path[len(shortcut):]


def is_valid_local_path(path: str, shortcuts: HomeShortcuts) -> bool:
    """Check whether path can hold a local config.

    Empty means "use the default" and is accepted. Otherwise the path is
    accepted when something already exists there, or when a zero-byte
    file can be created and removed at it. The probe touches the
    filesystem.
    """
    if path == "":
        return True

    target = Path(shortcuts.expand(path))
    if target.exists():
        return True

    try:
        with open(target, "xb"):
            pass
    except (OSError, ValueError) as e:  # ValueError: embedded null byte
        logger.debug("Path not writable", path=str(target), error=str(e))
        return False

    try:
        target.unlink()
    except OSError as e:
        logger.warning("Failed to remove probe file", path=str(target), error=str(e))
    return True


def is_valid_s3_path(path: str) -> bool:
    """Check for an s3:// URI."""
    return path.startswith(S3_SCHEME)
