"""Forwarded headers middleware."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable

from link_registry.common.headers import extract_forwarded_headers


class ForwardedHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and store X-Forwarded-* headers."""

    async def dispatch(self, request: Request, call_next: Callable):
        """Process request and extract forwarded headers."""
        forwarded = extract_forwarded_headers(dict(request.headers))
        request.state.forwarded_proto = forwarded["forwarded_proto"]
        request.state.forwarded_host = forwarded["forwarded_host"]
        request.state.forwarded_for = forwarded["forwarded_for"]

        response = await call_next(request)
        return response
