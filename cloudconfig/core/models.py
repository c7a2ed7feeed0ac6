"""Domain models for cloudconfig."""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class StorageType(str, Enum):
    """Where the application config is stored."""

    LOCAL = "local"
    S3 = "s3"


class EncryptionKind(str, Enum):
    """Supported config encryption kinds."""

    PASSWORD = "password"
    PRIVATE_KEY = "private key"


class EncryptionType(BaseModel):
    """Encryption settings for an encrypted config.

    Persisted as ``{"Type": ..., "KeyLocation": ...}``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: EncryptionKind = Field(alias="Type")
    key_location: str = Field(default="", alias="KeyLocation")  # empty for password

    def generate_key(self, passphrase: str) -> bytes | None:
        """Generate key material for this encryption kind.

        Not implemented: always returns None without raising. Callers
        must not assume a key was produced.
        """
        return None


class MetaConfigRecord(BaseModel):
    """Persisted description of how and where the application config lives."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    storage_type: StorageType = Field(alias="StorageType")
    config_path: str = Field(alias="ConfigPath", min_length=1)
    encryption: EncryptionType | None = Field(default=None, alias="EncryptionType")

    @property
    def is_encrypted(self) -> bool:
        """Check if the config is encrypted."""
        return self.encryption is not None

    def to_json(self, indent: int | None = None) -> str:
        """Serialize using the persisted field names."""
        return self.model_dump_json(by_alias=True, indent=indent)

    @classmethod
    def from_json(cls, data: str | bytes) -> "MetaConfigRecord":
        """Deserialize from the persisted field names."""
        return cls.model_validate_json(data)
