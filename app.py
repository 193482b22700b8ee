#!/usr/bin/env python3
"""
Main entry point for the link registry service.

Concurrency: requests are served asynchronously by a single uvicorn process
(FastAPI). Records live in process memory, so the service runs exactly one
worker; the store serializes per-record updates with a lock.

Usage:
    python app.py

Environment variables:
    BASE_URL - Base URL for short links
    PATH_PREFIX - Optional path segment before the short id
    HOST - Address to bind to
    PORT - Port to listen on
    SHORT_CODE_LENGTH - Length of generated short ids
    ID_STRATEGY - 'uuid' or 'random'
    MAX_COLLISION_RETRIES - Attempts on short id collision
    TRUST_FORWARDED_FOR - Record X-Forwarded-For as the client address
    LOG_LEVEL - Logging level
    LOG_FILE - Optional log file
    LOG_JSON - JSON log lines
"""

import logging
import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import Config, load_config
from link_registry.clock import SystemClock
from link_registry.store.memory import InMemoryLinkStore
from link_registry.service import LinkRegistryService
from link_registry.shortcode import ShortCodeGenerator
from link_registry.common.logging_config import setup_logging
from web_app import create_app


def build_service(config: Config, logger: logging.Logger) -> LinkRegistryService:
    """Wire generator, store and clock into a service.

    Args:
        config: Configuration instance
        logger: Logger shared by all components

    Returns:
        Ready-to-use service
    """
    generator = ShortCodeGenerator(
        default_length=config.short_code_length,
        strategy=config.id_strategy,
    )
    store = InMemoryLinkStore(logger=logger)

    return LinkRegistryService(
        store=store,
        base_url=config.base_url,
        short_code_generator=generator,
        clock=SystemClock(),
        logger=logger,
        path_prefix=config.path_prefix,
        max_collision_retries=config.max_collision_retries,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    logger = app.state.logger

    logger.info("Link registry started")

    yield

    logger.info("Shutting down link registry...")
    await app.state.service.close()
    logger.info("Service stopped")


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("Link Registry Service")
    logger.info(f"Configuration: {config.model_dump()}")

    service = build_service(config, logger)
    app = create_app(service_instance=service, config=config)
    app.state.logger = logger
    app.router.lifespan_context = lifespan

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    # Setup signal handlers for graceful shutdown
    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
