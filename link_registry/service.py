"""Business logic service for the link registry."""

import logging
from typing import Optional, Dict, Any

from .clock import Clock, SystemClock
from .shortcode import ShortCodeGenerator
from .store.base import LinkStoreBase
from .store.models import LinkRecord, VisitEvent, UNKNOWN
from .common.validators import is_valid_url, parse_expiration
from .common.url_builder import build_short_url
from .common.headers import user_agent_or_unknown
from .exceptions import (
    InvalidInputError,
    LinkConflictError,
    LinkGoneError,
    LinkNotFoundError,
    ShortIdExhaustedError,
)


class LinkRegistryService:
    """Service layer for creating, resolving and reporting on short links."""

    def __init__(
        self,
        store: LinkStoreBase,
        base_url: str,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        clock: Optional[Clock] = None,
        logger: Optional[logging.Logger] = None,
        path_prefix: str = "",
        max_collision_retries: int = 5,
    ):
        """Initialize link registry service.

        Args:
            store: Record store instance
            base_url: Base URL short links are built on
            short_code_generator: Optional short id generator
            clock: Optional time source (defaults to wall clock)
            logger: Optional logger
            path_prefix: Optional path segment placed before the short id
            max_collision_retries: Maximum generation attempts on collision
        """
        if max_collision_retries < 1:
            raise ValueError("max_collision_retries must be at least 1")

        self.store = store
        self.base_url = base_url
        self.path_prefix = path_prefix
        self.generator = short_code_generator or ShortCodeGenerator()
        self.clock = clock or SystemClock()
        self.logger = logger or logging.getLogger(__name__)
        self.max_collision_retries = max_collision_retries

    async def create_short_link(
        self,
        original_url: Optional[str],
        expiration_date: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Create a new short link.

        Args:
            original_url: The original long URL
            expiration_date: Optional ISO-8601 expiration date/time

        Returns:
            Dictionary with short_id, short_url, original_url, created_at, expires_at

        Raises:
            InvalidInputError: If the URL or the expiration date is invalid
            ShortIdExhaustedError: If no free short id was found
        """
        is_valid, error = is_valid_url(original_url)
        if not is_valid:
            raise InvalidInputError(f"Invalid or missing originalUrl: {error}")

        created_at = self.clock.now()

        # An empty expiration means the link never expires
        expires_at = None
        if expiration_date:
            expires_at, error = parse_expiration(expiration_date)
            if expires_at is None:
                raise InvalidInputError(error)
            if expires_at <= created_at:
                raise InvalidInputError("Expiration date must be in the future")

        for attempt in range(self.max_collision_retries):
            short_id = self.generator.generate()
            record = LinkRecord(
                short_id=short_id,
                original_url=original_url,
                created_at=created_at,
                expires_at=expires_at,
            )
            try:
                await self.store.insert(short_id, record)
            except LinkConflictError:
                self.logger.warning(f"Short id collision on {short_id} (attempt {attempt + 1})")
                continue
            break
        else:
            raise ShortIdExhaustedError(
                f"Unable to generate unique short id after {self.max_collision_retries} attempts"
            )

        self.logger.info(f"Created short link: {short_id} -> {original_url}")

        return {
            "short_id": short_id,
            "short_url": build_short_url(short_id, self.base_url, self.path_prefix),
            "original_url": original_url,
            "created_at": created_at,
            "expires_at": expires_at,
        }

    async def resolve(
        self,
        short_id: str,
        client_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> str:
        """Resolve a short id and record the visit.

        Args:
            short_id: The short id to resolve
            client_address: Client address as seen by the transport
            user_agent: User-Agent header value, if any

        Returns:
            The original URL to redirect to

        Raises:
            LinkNotFoundError: If the short id is unknown
            LinkGoneError: If the link has expired (it is purged)
        """
        now = self.clock.now()
        visit = VisitEvent(
            client_address=client_address or UNKNOWN,
            timestamp=now,
            user_agent=user_agent_or_unknown(user_agent),
        )

        def record_visit(record: LinkRecord) -> Optional[str]:
            if record.is_expired(now):
                return None
            record.add_visit(visit)
            return record.original_url

        try:
            original_url = await self.store.mutate(short_id, record_visit)
        except LinkNotFoundError:
            self.logger.warning(f"Short id not found: {short_id}")
            raise

        if original_url is None:
            await self.store.remove(short_id, expired_at=now)
            self.logger.info(f"Purged expired short link: {short_id}")
            raise LinkGoneError(short_id)

        self.logger.debug(f"Resolved {short_id} -> {original_url} for {visit.client_address}")
        return original_url

    async def get_analytics(self, short_id: str) -> Dict[str, Any]:
        """Get a snapshot of a short link and its visits.

        Expired records that no resolve has purged yet are still reported,
        flagged with `expired`.

        Args:
            short_id: The short id to lookup

        Returns:
            Dictionary with the record fields, visits and the expired flag

        Raises:
            LinkNotFoundError: If the short id is unknown
        """
        record = await self.store.get(short_id)
        snapshot = record.to_dict()
        snapshot["expired"] = record.is_expired(self.clock.now())
        return snapshot

    async def get_statistics(self) -> Dict[str, Any]:
        """Get service statistics.

        Returns:
            Dictionary with statistics
        """
        total_links, total_clicks = await self.store.count()

        return {
            "total_links": total_links,
            "total_clicks": total_clicks,
            "store": self.store.name,
            "id_strategy": self.generator.strategy,
        }

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        store_healthy = await self.store.health_check()

        return {
            "store": store_healthy,
            "overall": store_healthy,
        }

    async def close(self) -> None:
        """Close the underlying store."""
        await self.store.close()
