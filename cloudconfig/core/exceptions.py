"""Domain exceptions for cloudconfig."""
from typing import Any


class CloudConfigError(Exception):
    """Base exception for all cloudconfig errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


# Startup errors
class StartupError(CloudConfigError):
    """Error resolving process-wide state at startup."""

    pass


class CurrentUserError(StartupError):
    """Current user or home directory could not be resolved."""

    pass


# Session errors
class SessionError(CloudConfigError):
    """Error during an interactive setup session."""

    pass


class PromptIOError(SessionError):
    """Reading an answer or writing a prompt failed."""

    pass


class InputClosedError(PromptIOError):
    """Input stream ended before a valid answer was given."""

    pass


class PromptAttemptsExceededError(SessionError):
    """Configured retry cap reached without a valid answer."""

    def __init__(self, prompt: str, attempts: int) -> None:
        super().__init__(
            message=f"No valid answer after {attempts} attempts",
            details={"prompt": prompt, "attempts": attempts},
        )
        self.attempts = attempts


class SessionStateError(SessionError):
    """Session step called out of order."""

    pass


# Persistence errors
class PersistenceError(CloudConfigError):
    """Error saving or loading the meta config."""

    pass


class MetaConfigIOError(PersistenceError):
    """Meta config file could not be read or written."""

    pass


class MetaConfigNotFoundError(MetaConfigIOError):
    """Meta config file does not exist."""

    pass


class MetaConfigSerializationError(PersistenceError):
    """Meta config could not be marshalled or unmarshalled."""

    pass
