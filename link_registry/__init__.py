"""Core business logic for the link registry."""

from .clock import Clock, SystemClock, ManualClock
from .shortcode import ShortCodeGenerator
from .service import LinkRegistryService
from .store import InMemoryLinkStore, LinkRecord, VisitEvent

__all__ = [
    "Clock",
    "SystemClock",
    "ManualClock",
    "ShortCodeGenerator",
    "LinkRegistryService",
    "InMemoryLinkStore",
    "LinkRecord",
    "VisitEvent",
]
