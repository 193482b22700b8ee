"""API routes implementation."""

from fastapi import APIRouter, Request
from datetime import datetime, timezone

from .schemas import (
    ShortenRequest,
    ShortenResponse,
    AnalyticsResponse,
    VisitResponse,
    HealthResponse,
    ErrorResponse,
    StatisticsResponse,
)

router = APIRouter()


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid or missing URL, or bad expiration date"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Create short link",
    description="Create a shortened URL, optionally expiring at the given ISO-8601 date/time.",
)
async def shorten_url(request: Request, body: ShortenRequest):
    """Create a shortened URL."""
    service = request.app.state.service

    result = await service.create_short_link(
        original_url=body.original_url,
        expiration_date=body.expiration_date,
    )

    return ShortenResponse(
        shortened_url=result["short_url"],
        short_id=result["short_id"],
    )


@router.get(
    "/analytics/{short_id}",
    response_model=AnalyticsResponse,
    response_model_exclude_none=True,
    responses={
        404: {"model": ErrorResponse, "description": "Short id not found"},
    },
    summary="Get link analytics",
    description="Get the click count and visit log of a short link.",
)
async def get_analytics(request: Request, short_id: str):
    """Get analytics for a short link."""
    service = request.app.state.service

    snapshot = await service.get_analytics(short_id)

    return AnalyticsResponse(
        original_url=snapshot["original_url"],
        short_id=snapshot["short_id"],
        created_at=snapshot["created_at"],
        expiration_date=snapshot["expires_at"],
        click_count=snapshot["click_count"],
        expired=snapshot["expired"],
        visits=[
            VisitResponse(
                ip=visit["client_address"],
                timestamp=visit["timestamp"],
                useragent=visit["user_agent"],
            )
            for visit in snapshot["visits"]
        ],
    )


@router.get(
    "/stats",
    response_model=StatisticsResponse,
    summary="Get statistics",
    description="Get service-wide statistics.",
)
async def get_statistics(request: Request):
    """Get service statistics."""
    service = request.app.state.service

    stats = await service.get_statistics()

    return StatisticsResponse(**stats)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    service = request.app.state.service

    health = await service.health_check()

    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        store="healthy" if health["store"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )
