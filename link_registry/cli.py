#!/usr/bin/env python3
"""
Command-line client for a running link registry service.

Usage:
    link-registry-cli shorten <url> [--expires ISO_DATE]
    link-registry-cli resolve <short_id>
    link-registry-cli analytics <short_id>
    link-registry-cli stats
    link-registry-cli health
"""

import argparse
import json
import os
import sys
from typing import Any, Dict, List, Optional

import httpx

from .common.logging_config import setup_logging


DEFAULT_SERVICE_URL = "http://localhost:3000"


class LinkRegistryCLI:
    """Command-line interface for the link registry HTTP API."""

    def __init__(
        self,
        base_url: str = DEFAULT_SERVICE_URL,
        client: Optional[httpx.Client] = None,
        verbose: bool = False,
        timeout: float = 10.0,
    ):
        """Initialize CLI.

        Args:
            base_url: Address of the running service
            client: Optional preconfigured HTTP client (its base URL is used as is)
            verbose: Log requests at DEBUG level
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.logger = setup_logging(level="DEBUG" if verbose else "WARNING")
        self._owns_client = client is None
        self.client = client or httpx.Client(base_url=self.base_url, timeout=timeout)

    def close(self):
        """Close the HTTP client if this CLI created it."""
        if self._owns_client:
            self.client.close()

    def _emit(self, payload: Dict[str, Any], error: bool = False) -> int:
        stream = sys.stderr if error else sys.stdout
        print(json.dumps(payload, indent=2), file=stream)
        return 1 if error else 0

    def _error_from_response(self, response: httpx.Response) -> int:
        try:
            body = response.json()
        except ValueError:
            body = {"error": response.text}
        return self._emit({
            "success": False,
            "status": response.status_code,
            "error": body.get("error"),
            "detail": body.get("detail"),
        }, error=True)

    def _request(self, method: str, path: str, **kwargs) -> Optional[httpx.Response]:
        self.logger.debug(f"{method} {path}")
        try:
            return self.client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            self._emit({
                "success": False,
                "error": f"Request to {self.base_url}{path} failed: {e}",
            }, error=True)
            return None

    def shorten(self, url: str, expires: Optional[str] = None) -> int:
        """Shorten a URL."""
        body = {"originalUrl": url}
        if expires:
            body["expirationDate"] = expires

        response = self._request("POST", "/shorten", json=body)
        if response is None:
            return 1
        if response.status_code != 200:
            return self._error_from_response(response)

        data = response.json()
        return self._emit({
            "success": True,
            "short_id": data["shortId"],
            "shortened_url": data["shortenedUrl"],
            "original_url": url,
            "message": f"Successfully shortened URL to: {data['shortenedUrl']}",
        })

    def resolve(self, short_id: str) -> int:
        """Report where a short link redirects to (counts as a visit)."""
        response = self._request("GET", f"/{short_id}", follow_redirects=False)
        if response is None:
            return 1
        if not response.is_redirect:
            return self._error_from_response(response)

        return self._emit({
            "success": True,
            "short_id": short_id,
            "original_url": response.headers.get("location"),
        })

    def analytics(self, short_id: str) -> int:
        """Show analytics for a short link."""
        response = self._request("GET", f"/analytics/{short_id}")
        if response is None:
            return 1
        if response.status_code != 200:
            return self._error_from_response(response)

        return self._emit({"success": True, **response.json()})

    def stats(self) -> int:
        """Show service-wide statistics."""
        response = self._request("GET", "/stats")
        if response is None:
            return 1
        if response.status_code != 200:
            return self._error_from_response(response)

        return self._emit({"success": True, **response.json()})

    def health(self) -> int:
        """Check service health."""
        response = self._request("GET", "/health")
        if response is None:
            return 1
        if response.status_code != 200:
            return self._error_from_response(response)

        data = response.json()
        self._emit({"success": True, "health": data})
        return 0 if data.get("status") == "healthy" else 1


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Link Registry CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL
  %(prog)s shorten https://example.com/long/url

  # Shorten a URL that stops working at the end of 2030
  %(prog)s shorten https://example.com/long/url --expires 2030-12-31T23:59:59Z

  # Show where a short link points (records a visit)
  %(prog)s resolve aB3dE9xZ

  # Show visits of a short link
  %(prog)s analytics aB3dE9xZ

  # Check health
  %(prog)s health
        """
    )

    parser.add_argument(
        "--service-url",
        default=os.getenv("LINK_REGISTRY_URL", DEFAULT_SERVICE_URL),
        help=f"Service base URL (default: from LINK_REGISTRY_URL env or {DEFAULT_SERVICE_URL})"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")
    shorten_parser.add_argument("--expires", help="ISO-8601 expiration date/time")

    resolve_parser = subparsers.add_parser("resolve", help="Resolve a short id")
    resolve_parser.add_argument("short_id", help="Short id to resolve")

    analytics_parser = subparsers.add_parser("analytics", help="Get link analytics")
    analytics_parser.add_argument("short_id", help="Short id to get analytics for")

    subparsers.add_parser("stats", help="Get service statistics")
    subparsers.add_parser("health", help="Check service health")

    return parser


def main(argv: Optional[List[str]] = None, client: Optional[httpx.Client] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    cli = LinkRegistryCLI(
        base_url=args.service_url,
        client=client,
        verbose=args.verbose,
    )

    try:
        if args.command == "shorten":
            return cli.shorten(args.url, args.expires)
        elif args.command == "resolve":
            return cli.resolve(args.short_id)
        elif args.command == "analytics":
            return cli.analytics(args.short_id)
        elif args.command == "stats":
            return cli.stats()
        elif args.command == "health":
            return cli.health()
        else:
            parser.print_help()
            return 1
    finally:
        cli.close()


def run():
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
