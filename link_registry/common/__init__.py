"""Common utilities for the link registry."""

from .validators import is_valid_url, parse_expiration
from .headers import extract_forwarded_headers, resolve_client_address, user_agent_or_unknown
from .url_builder import build_short_url
from .logging_config import setup_logging

__all__ = [
    "is_valid_url",
    "parse_expiration",
    "extract_forwarded_headers",
    "resolve_client_address",
    "user_agent_or_unknown",
    "build_short_url",
    "setup_logging",
]
