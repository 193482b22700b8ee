"""Record store layer for the link registry."""

from .base import LinkStoreBase
from .memory import InMemoryLinkStore
from .models import LinkRecord, VisitEvent

__all__ = ["LinkStoreBase", "InMemoryLinkStore", "LinkRecord", "VisitEvent"]
