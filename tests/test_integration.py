"""Integration tests for the link registry."""

import pytest
from httpx import ASGITransport, AsyncClient

from app import build_service, lifespan
from config import Config
from link_registry.clock import SystemClock
from link_registry.common.logging_config import setup_logging
from web_app import create_app


@pytest.mark.asyncio
class TestIntegration:
    """End-to-end integration tests."""

    async def test_full_link_lifecycle(self):
        """Test complete create, resolve, analytics lifecycle with production wiring."""
        logger = setup_logging(level="DEBUG")
        config = Config(
            _env_file=None,
            base_url="https://sho.rt",
            path_prefix="/l",
            short_code_length=10,
            id_strategy="random",
        )

        service = build_service(config, logger)
        assert isinstance(service.clock, SystemClock)

        app = create_app(service_instance=service, config=config)

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
            # 1. Create short link
            create_response = await client.post(
                "/shorten",
                json={"originalUrl": "https://a.test"},
            )
            assert create_response.status_code == 200
            data = create_response.json()
            short_id = data["shortId"]
            assert len(short_id) == 10
            assert data["shortenedUrl"] == f"https://sho.rt/l/{short_id}"

            # 2. Analytics before any visit
            info = (await client.get(f"/analytics/{short_id}")).json()
            assert info["clickCount"] == 0
            assert info["visits"] == []

            # 3. Two visits from different clients
            r1 = await client.get(f"/{short_id}", headers={"User-Agent": "first"})
            r2 = await client.get(f"/{short_id}", headers={"User-Agent": "second"})
            assert r1.status_code == r2.status_code == 302
            assert r1.headers["location"] == "https://a.test"

            # 4. Analytics reflects both, in order
            info = (await client.get(f"/analytics/{short_id}")).json()
            assert info["clickCount"] == 2
            assert [v["useragent"] for v in info["visits"]] == ["first", "second"]

            # 5. Statistics
            stats = (await client.get("/stats")).json()
            assert stats["totalLinks"] == 1
            assert stats["totalClicks"] == 2
            assert stats["idStrategy"] == "random"

    async def test_lifespan_closes_service(self):
        """Test shutdown closes the store."""
        logger = setup_logging(level="DEBUG")
        config = Config(_env_file=None)
        service = build_service(config, logger)
        app = create_app(service_instance=service, config=config)
        app.state.logger = logger

        async with lifespan(app):
            assert (await service.health_check())["overall"]

        assert not (await service.health_check())["overall"]
