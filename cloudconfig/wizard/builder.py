"""Interactive setup session that builds a meta config record."""
from collections.abc import Collection
from enum import Enum
from typing import TextIO

from cloudconfig.core.config import Settings
from cloudconfig.core.exceptions import SessionStateError
from cloudconfig.core.logging import get_logger
from cloudconfig.core.models import (
    EncryptionKind,
    EncryptionType,
    MetaConfigRecord,
    StorageType,
)
from cloudconfig.wizard.paths import HomeShortcuts, is_valid_local_path, is_valid_s3_path
from cloudconfig.wizard.prompter import Prompter, Validator

logger = get_logger(__name__)

STORAGE_TYPE_PROMPT = "Please enter a storage type for your config (local, s3)"
CONFIG_PATH_PROMPT = "Please enter a storage path for your config. (default: $HOME/.cloudconfig)"
ENCRYPT_PROMPT = "Would you like to encrypt your configuration file? (y, n, yes, no)"
ENCRYPTION_KIND_PROMPT = "What kind of encryption would you like to use? (password, private key)"
KEY_LOCATION_PROMPT = (
    "Please enter a location for your private key. (default: $HOME/.ssh/cloudconfigkey)"
)

YES_ANSWERS = ("y", "yes")
NO_ANSWERS = ("n", "no")


class SessionState(str, Enum):
    """Progress of a setup session."""

    START = "start"
    STORAGE_TYPE_COLLECTED = "storage_type_collected"
    PATH_COLLECTED = "path_collected"
    ENCRYPTION_COLLECTED = "encryption_collected"
    READY = "ready"


class InteractiveConfigBuilder:
    """Collects meta config fields from an operator.

    The builder owns the session streams and the draft answers. Once the
    fields are collected, ``build`` returns an immutable record that can
    be persisted without the streams.

    Example:
        builder = InteractiveConfigBuilder(sys.stdin, sys.stdout, settings)
        builder.collect_fields(with_encryption=True)
        record = builder.build()
    """

    def __init__(self, input_stream: TextIO, output_stream: TextIO, settings: Settings) -> None:
        self.settings = settings
        self.prompter = Prompter(
            input_stream,
            output_stream,
            max_attempts=settings.max_prompt_attempts,
        )
        self.shortcuts = HomeShortcuts(settings.home_dir, settings.home_shortcuts)
        self.state = SessionState.START

        self.storage_type: StorageType | None = None
        self.config_path: str | None = None
        self.encryption: EncryptionType | None = None

    def prompt_choice(
        self,
        prompt: str,
        validator: Validator | None = None,
        allowed: Collection[str] = (),
    ) -> str:
        """Prompt until the answer passes validator, or matches one of allowed."""
        return self.prompter.ask(prompt, validator=validator, allowed=allowed)

    def collect_storage_type(self) -> StorageType:
        """Prompt for the storage type."""
        self._require(SessionState.START)
        answer = self.prompt_choice(
            STORAGE_TYPE_PROMPT,
            allowed=[storage.value for storage in StorageType],
        )
        self.storage_type = StorageType(answer)
        self.state = SessionState.STORAGE_TYPE_COLLECTED
        logger.info("Storage type collected", storage_type=self.storage_type.value)
        return self.storage_type

    def collect_config_path(self) -> str:
        """Prompt for the config path, validated for the storage type."""
        self._require(SessionState.STORAGE_TYPE_COLLECTED)
        answer = self.prompt_choice(CONFIG_PATH_PROMPT, validator=self.is_valid_path)
        if answer == "":
            self.config_path = str(self.settings.default_config_path)
        else:
            self.config_path = self.shortcuts.expand(answer)
        self.state = SessionState.PATH_COLLECTED
        logger.info("Config path collected", config_path=self.config_path)
        return self.config_path

    def collect_encryption_choice(self) -> EncryptionType | None:
        """Ask whether to encrypt, and with which kind.

        Answers match literally: only lowercase ``y``, ``n``, ``yes``
        and ``no`` are accepted. No key is generated here.
        """
        self._require(SessionState.PATH_COLLECTED)
        answer = self.prompt_choice(ENCRYPT_PROMPT, allowed=YES_ANSWERS + NO_ANSWERS)
        if answer in YES_ANSWERS:
            kind = EncryptionKind(
                self.prompt_choice(
                    ENCRYPTION_KIND_PROMPT,
                    allowed=[kind.value for kind in EncryptionKind],
                )
            )
            key_location = ""
            if kind == EncryptionKind.PRIVATE_KEY:
                key_location = self._collect_key_location()
            self.encryption = EncryptionType(kind=kind, key_location=key_location)
            logger.info("Encryption collected", kind=kind.value, key_location=key_location)

        self.state = SessionState.ENCRYPTION_COLLECTED
        return self.encryption

    def collect_fields(self, with_encryption: bool = False) -> None:
        """Run the full question sequence."""
        self.collect_storage_type()
        self.collect_config_path()
        if with_encryption:
            self.collect_encryption_choice()

    def build(self) -> MetaConfigRecord:
        """Finish the session and return the collected record."""
        self._require(SessionState.PATH_COLLECTED, SessionState.ENCRYPTION_COLLECTED)
        record = MetaConfigRecord(
            storage_type=self.storage_type,
            config_path=self.config_path,
            encryption=self.encryption,
        )
        self.state = SessionState.READY
        return record

    def is_valid_path(self, path: str) -> bool:
        """Check a config path against the current storage type."""
        if self.storage_type == StorageType.LOCAL:
            return is_valid_local_path(path, self.shortcuts)
        if self.storage_type == StorageType.S3:
            return is_valid_s3_path(path)
        return False

    def _collect_key_location(self) -> str:
        answer = self.prompt_choice(
            KEY_LOCATION_PROMPT,
            validator=lambda path: is_valid_local_path(path, self.shortcuts),
        )
        if answer == "":
            return str(self.settings.default_private_key_path)
        return self.shortcuts.expand(answer)

    def _require(self, *states: SessionState) -> None:
        if self.state not in states:
            raise SessionStateError(
                f"Session step not allowed in state '{self.state.value}'",
                details={"expected": [state.value for state in states]},
            )


def generate(
    input_stream: TextIO,
    output_stream: TextIO,
    settings: Settings,
    with_encryption: bool = False,
) -> MetaConfigRecord:
    """Run a full setup session and return the resulting record.

    Invalid answers are re-prompted, never raised. Only stream failures
    escape, as PromptIOError.
    """
    builder = InteractiveConfigBuilder(input_stream, output_stream, settings)
    builder.collect_fields(with_encryption=with_encryption)
    return builder.build()
