"""Time sources used for creation stamps and expiration checks."""

from datetime import datetime, timedelta, timezone
from typing import Optional


class Clock:
    """Source of the current time (always timezone-aware UTC)."""

    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock(Clock):
    """Wall-clock time."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class ManualClock(Clock):
    """Clock that only moves when told to."""

    def __init__(self, start: Optional[datetime] = None):
        """Initialize manual clock.

        Args:
            start: Initial time (defaults to the current wall-clock time)
        """
        self._now = start or datetime.now(timezone.utc)

    def now(self) -> datetime:
        return self._now

    def advance(self, **kwargs) -> datetime:
        """Move the clock forward by a `timedelta(**kwargs)` and return the new time."""
        self._now = self._now + timedelta(**kwargs)
        return self._now

    def set(self, value: datetime) -> None:
        self._now = value
