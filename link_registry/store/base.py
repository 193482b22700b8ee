"""Abstract base class for link record stores."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Callable, Optional, Tuple

from .models import LinkRecord


class LinkStoreBase(ABC):
    """Abstract base class for link record storage.

    Every read-modify-write of a single record goes through `mutate`, so an
    implementation only has to make that one call atomic per record.
    """

    name = "base"

    @abstractmethod
    async def insert(self, short_id: str, record: LinkRecord) -> None:
        """Insert a new record.

        Args:
            short_id: The key to store the record under
            record: The record to store

        Raises:
            LinkConflictError: If a live record already uses `short_id`
        """
        pass

    @abstractmethod
    async def get(self, short_id: str) -> LinkRecord:
        """Get a snapshot of the record for a short id.

        Args:
            short_id: The short id to lookup

        Returns:
            A copy of the stored record; changing it does not touch the store

        Raises:
            LinkNotFoundError: If no record exists
        """
        pass

    @abstractmethod
    async def remove(self, short_id: str, expired_at: Optional[datetime] = None) -> bool:
        """Remove a record. Removing a missing record is not an error.

        Args:
            short_id: The short id to remove
            expired_at: If given, only remove the record when it is expired at this instant

        Returns:
            True if a record was removed
        """
        pass

    @abstractmethod
    async def mutate(self, short_id: str, fn: Callable[[LinkRecord], Any]) -> Any:
        """Atomically apply `fn` to the stored record.

        Args:
            short_id: The short id to update
            fn: Callable receiving the live record; its return value is passed through

        Returns:
            Whatever `fn` returns

        Raises:
            LinkNotFoundError: If no record exists
        """
        pass

    @abstractmethod
    async def count(self) -> Tuple[int, int]:
        """Count stored records and their clicks.

        Returns:
            Tuple of (total_links, total_clicks)
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release store resources."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is usable.

        Returns:
            True if healthy, False otherwise
        """
        pass
