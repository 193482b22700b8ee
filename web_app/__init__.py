"""Web application for the link registry."""

from .app_factory import create_app

__all__ = ["create_app"]
