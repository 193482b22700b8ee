"""Header parsing utilities for the link registry."""

from typing import Dict, Optional

from ..store.models import UNKNOWN


def extract_forwarded_headers(headers: Dict[str, str]) -> Dict[str, Optional[str]]:
    """Extract X-Forwarded-* headers from request.

    Args:
        headers: Request headers dictionary

    Returns:
        Dictionary with forwarded_proto, forwarded_host, forwarded_for
    """
    # Convert headers to lowercase for case-insensitive lookup
    headers_lower = {k.lower(): v for k, v in headers.items()}

    return {
        "forwarded_proto": headers_lower.get("x-forwarded-proto"),
        "forwarded_host": headers_lower.get("x-forwarded-host"),
        "forwarded_for": headers_lower.get("x-forwarded-for"),
    }


def resolve_client_address(
    peer_address: Optional[str],
    forwarded_for: Optional[str] = None,
    trust_forwarded_for: bool = False,
) -> str:
    """Pick the client address to record for a visit.

    Priority:
    1. First hop of X-Forwarded-For (only when trusted)
    2. Transport peer address
    3. "unknown"

    Args:
        peer_address: Address of the connected peer
        forwarded_for: Raw X-Forwarded-For header value
        trust_forwarded_for: Whether the service runs behind a trusted proxy

    Returns:
        Client address as presented, without further validation
    """
    if trust_forwarded_for and forwarded_for:
        first_hop = forwarded_for.split(",")[0].strip()
        if first_hop:
            return first_hop

    return peer_address or UNKNOWN


def user_agent_or_unknown(user_agent: Optional[str]) -> str:
    """Return the user agent verbatim, or "unknown" when missing."""
    return user_agent if user_agent else UNKNOWN
