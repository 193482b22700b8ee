"""Redirect route implementation."""

from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse

from link_registry.common.headers import resolve_client_address

router = APIRouter()


@router.get(
    "/{short_id}",
    summary="Follow short link",
    description="Redirect to the original URL and record the visit.",
    status_code=status.HTTP_302_FOUND,
    response_class=RedirectResponse,
)
async def redirect_to_url(request: Request, short_id: str):
    """Redirect to the original URL."""
    service = request.app.state.service
    config = request.app.state.config

    client_address = resolve_client_address(
        peer_address=request.client.host if request.client else None,
        forwarded_for=request.state.forwarded_for,
        trust_forwarded_for=config.trust_forwarded_for,
    )

    # Raises LinkNotFoundError (404) or LinkGoneError (410)
    original_url = await service.resolve(
        short_id,
        client_address=client_address,
        user_agent=request.headers.get("user-agent"),
    )

    # Perform 302 redirect (temporary redirect for tracking)
    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)
