"""Validation utilities for the link registry."""

from datetime import datetime, timezone
from urllib.parse import urlparse
from typing import Optional, Tuple


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a URL.

    Only syntax is checked: the URL must be absolute, with a scheme and a host.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"

    if any(c.isspace() for c in url):
        return False, "URL must not contain whitespace"

    try:
        result = urlparse(url)

        if not result.scheme:
            return False, "URL must be absolute (missing scheme)"

        # Check if netloc has a host part
        if not result.hostname:
            return False, "URL must have a valid host"

        # Accessing the port validates it
        result.port

        return True, ""

    except ValueError as e:
        return False, f"Invalid URL format: {str(e)}"


def parse_expiration(value: str) -> Tuple[Optional[datetime], str]:
    """Parse an ISO-8601 expiration date/time.

    Values without a timezone are taken as UTC.

    Args:
        value: Date or date/time string (e.g. 2030-01-01 or 2030-01-01T12:00:00Z)

    Returns:
        Tuple of (aware UTC datetime or None, error_message)
    """
    if not isinstance(value, str) or not value.strip():
        return None, "Expiration date must be a non-empty ISO-8601 string"

    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None, f"Expiration date '{value}' is not a valid ISO-8601 date/time"

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)

    try:
        return parsed.astimezone(timezone.utc), ""
    except (ValueError, OverflowError):
        return None, f"Expiration date '{value}' is out of range"
