"""In-process link record store."""

import copy
import logging
import threading
from datetime import datetime
from typing import Any, Callable, Dict, Optional, Tuple

from .base import LinkStoreBase
from .models import LinkRecord
from ..exceptions import LinkConflictError, LinkNotFoundError


class InMemoryLinkStore(LinkStoreBase):
    """Dictionary of link records guarded by a single lock.

    Critical sections never await or do I/O; the lock may be taken from the
    event loop or from worker threads.
    """

    name = "memory"

    def __init__(self, logger: Optional[logging.Logger] = None):
        """Initialize the store.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self._records: Dict[str, LinkRecord] = {}
        self._lock = threading.Lock()
        self._closed = False

    async def insert(self, short_id: str, record: LinkRecord) -> None:
        with self._lock:
            existing = self._records.get(short_id)
            if existing is not None:
                if not existing.is_expired(record.created_at):
                    raise LinkConflictError(short_id)
                self.logger.debug(f"Replacing expired record for {short_id}")
            self._records[short_id] = record

    async def get(self, short_id: str) -> LinkRecord:
        with self._lock:
            record = self._records.get(short_id)
            if record is None:
                raise LinkNotFoundError(short_id)
            return copy.deepcopy(record)

    async def remove(self, short_id: str, expired_at: Optional[datetime] = None) -> bool:
        with self._lock:
            record = self._records.get(short_id)
            if record is None:
                return False
            if expired_at is not None and not record.is_expired(expired_at):
                return False
            del self._records[short_id]
            return True

    async def mutate(self, short_id: str, fn: Callable[[LinkRecord], Any]) -> Any:
        with self._lock:
            record = self._records.get(short_id)
            if record is None:
                raise LinkNotFoundError(short_id)
            return fn(record)

    async def count(self) -> Tuple[int, int]:
        with self._lock:
            clicks = sum(record.click_count for record in self._records.values())
            return len(self._records), clicks

    async def close(self) -> None:
        with self._lock:
            self.logger.info(f"Closing in-memory store with {len(self._records)} records")
            self._records.clear()
            self._closed = True

    async def health_check(self) -> bool:
        return not self._closed

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
