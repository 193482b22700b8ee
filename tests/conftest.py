"""Pytest configuration and fixtures."""

import pytest
from datetime import datetime, timezone
from typing import AsyncGenerator

from httpx import ASGITransport, AsyncClient

from config import Config
from link_registry.clock import ManualClock
from link_registry.service import LinkRegistryService
from link_registry.shortcode import ShortCodeGenerator
from link_registry.store.memory import InMemoryLinkStore
from link_registry.common.logging_config import setup_logging
from web_app import create_app


BASE_URL = "http://testserver"
START = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def clock():
    """Clock frozen at START until a test advances it."""
    return ManualClock(START)


@pytest.fixture
def store(logger):
    """Create empty in-memory store."""
    return InMemoryLinkStore(logger=logger)


@pytest.fixture
def short_code_generator():
    """Create short id generator."""
    return ShortCodeGenerator(default_length=8)


@pytest.fixture
def service(store, short_code_generator, clock, logger) -> LinkRegistryService:
    """Create service instance."""
    return LinkRegistryService(
        store=store,
        base_url=BASE_URL,
        short_code_generator=short_code_generator,
        clock=clock,
        logger=logger,
    )


@pytest.fixture
def config():
    """Configuration that ignores any local .env file."""
    return Config(_env_file=None, base_url=BASE_URL)


@pytest.fixture
def app(service, config):
    """Create test FastAPI app."""
    return create_app(service_instance=service, config=config)


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url=BASE_URL) as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/path",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
