"""Data models for the link registry."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


UNKNOWN = "unknown"


@dataclass(frozen=True)
class VisitEvent:
    """One successful resolution of a short link."""

    client_address: str
    timestamp: datetime
    user_agent: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "client_address": self.client_address,
            "timestamp": self.timestamp,
            "user_agent": self.user_agent,
        }


@dataclass
class LinkRecord:
    """Represents a shortened URL and the visits recorded against it."""

    short_id: str
    original_url: str
    created_at: datetime
    expires_at: Optional[datetime] = None
    click_count: int = 0
    visits: List[VisitEvent] = field(default_factory=list)

    def __post_init__(self):
        if self.expires_at is not None and self.expires_at <= self.created_at:
            raise ValueError("expires_at must be later than created_at")

    def is_expired(self, now: datetime) -> bool:
        """Check whether the record is past its expiration at `now`.

        Args:
            now: Reference instant

        Returns:
            True if the record has an expiration and `now` is after it
        """
        return self.expires_at is not None and now > self.expires_at

    def add_visit(self, visit: VisitEvent) -> None:
        """Record a visit; the counter and the log always move together."""
        self.visits.append(visit)
        self.click_count += 1

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "short_id": self.short_id,
            "original_url": self.original_url,
            "created_at": self.created_at,
            "expires_at": self.expires_at,
            "click_count": self.click_count,
            "visits": [visit.to_dict() for visit in self.visits],
        }
