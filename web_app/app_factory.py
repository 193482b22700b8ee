"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from link_registry.exceptions import LinkRegistryError
from .api import api_router
from .web import web_router
from .middleware.headers import ForwardedHeadersMiddleware
from .middleware.logging import LoggingMiddleware


logger = logging.getLogger("link_registry.web")


async def link_registry_error_handler(request: Request, exc: LinkRegistryError) -> JSONResponse:
    """Render registry errors as `{"error", "detail"}` with the exception's status code."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        detail = None
    else:
        detail = str(exc)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.title, "detail": detail},
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as 400 Bad Request."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg", ""))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid input", "detail": "; ".join(messages)},
    )


def create_app(
    service_instance,
    config,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        service_instance: Service instance
        config: Configuration instance

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Link Registry",
        description="URL shortening service with per-visit analytics",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    # Store instances in app state for access in routes
    app.state.service = service_instance
    app.state.config = config

    app.add_exception_handler(LinkRegistryError, link_registry_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    # The presentation layer is served from its own origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add custom middleware
    app.add_middleware(ForwardedHeadersMiddleware)
    app.add_middleware(LoggingMiddleware)

    # API routes first: the redirect route matches any single path segment
    app.include_router(api_router, tags=["API"])
    app.include_router(web_router, tags=["Redirect"])

    return app
