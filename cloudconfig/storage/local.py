"""Local filesystem meta config store."""
import os
from pathlib import Path

from pydantic import ValidationError

from cloudconfig.core.config import Settings
from cloudconfig.core.exceptions import (
    MetaConfigIOError,
    MetaConfigNotFoundError,
    MetaConfigSerializationError,
)
from cloudconfig.core.logging import get_logger
from cloudconfig.core.models import MetaConfigRecord
from cloudconfig.storage.base import MetaConfigStore

logger = get_logger(__name__)

FILE_MODE = 0o644


class LocalMetaConfigStore(MetaConfigStore):
    """Meta config store backed by a single JSON file.

    Example:
        store = LocalMetaConfigStore(settings.meta_config_path)
        store.save(record)
        record = store.load()
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    @property
    def location(self) -> str:
        return str(self.path)

    def save(self, record: MetaConfigRecord) -> str:
        """Write the record, creating the file with mode 0644."""
        try:
            data = record.to_json()
        except (ValueError, TypeError) as e:
            raise MetaConfigSerializationError(f"Failed to serialize meta config: {e}") from e

        try:
            fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(data)
        except OSError as e:
            logger.error("Failed to save meta config", path=str(self.path), error=str(e))
            raise MetaConfigIOError(
                f"Failed to write {self.path}: {e}",
                details={"path": str(self.path)},
            ) from e

        logger.info("Meta config saved", path=str(self.path))
        return str(self.path)

    def load(self) -> MetaConfigRecord:
        """Read and parse the record."""
        try:
            data = self.path.read_bytes()
        except FileNotFoundError as e:
            raise MetaConfigNotFoundError(
                f"Meta config not found: {self.path}",
                details={"path": str(self.path)},
            ) from e
        except OSError as e:
            logger.error("Failed to load meta config", path=str(self.path), error=str(e))
            raise MetaConfigIOError(
                f"Failed to read {self.path}: {e}",
                details={"path": str(self.path)},
            ) from e

        try:
            return MetaConfigRecord.from_json(data)
        except ValidationError as e:
            raise MetaConfigSerializationError(
                f"Malformed meta config in {self.path}",
                details={"path": str(self.path), "errors": e.errors(include_url=False)},
            ) from e
        except UnicodeDecodeError as e:
            raise MetaConfigSerializationError(
                f"Meta config in {self.path} is not valid UTF-8",
                details={"path": str(self.path)},
            ) from e

    def exists(self) -> bool:
        return self.path.exists()


def save_meta_config(record: MetaConfigRecord, settings: Settings) -> str:
    """Save a record to the configured meta config path."""
    return LocalMetaConfigStore(settings.meta_config_path).save(record)


def load_meta_config(settings: Settings) -> MetaConfigRecord:
    """Load the record from the configured meta config path."""
    return LocalMetaConfigStore(settings.meta_config_path).load()
