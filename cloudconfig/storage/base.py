"""Abstract meta config store interface."""
from abc import ABC, abstractmethod

from cloudconfig.core.models import MetaConfigRecord


class MetaConfigStore(ABC):
    """Abstract base class for meta config persistence.

    Stores only the record; session streams are never persisted.
    """

    @abstractmethod
    def save(self, record: MetaConfigRecord) -> str:
        """Persist a record.

        Args:
            record: Completed meta config record

        Returns:
            Location the record was written to
        """
        ...

    @abstractmethod
    def load(self) -> MetaConfigRecord:
        """Load the persisted record.

        Returns:
            Record without any session state
        """
        ...

    @abstractmethod
    def exists(self) -> bool:
        """Check if a record has been persisted."""
        ...

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable location of the record."""
        ...
