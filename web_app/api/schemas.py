"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


class ShortenRequest(BaseModel):
    """Request to shorten a URL.

    Both fields are optional here; the service validates them.
    """

    original_url: Optional[str] = Field(None, alias="originalUrl", description="The URL to shorten")
    expiration_date: Optional[str] = Field(
        None,
        alias="expirationDate",
        description="Optional ISO-8601 date/time after which the link stops resolving",
    )

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "originalUrl": "https://example.com/very/long/path/to/resource",
                },
                {
                    "originalUrl": "https://github.com/user/repo",
                    "expirationDate": "2030-01-01T00:00:00Z",
                },
            ]
        },
    }


class ShortenResponse(BaseModel):
    """Response after shortening a URL."""

    shortened_url: str = Field(..., alias="shortenedUrl", description="The complete short URL")
    short_id: str = Field(..., alias="shortId", description="The generated short id")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "shortenedUrl": "http://localhost:3000/aB3dE9xZ",
                    "shortId": "aB3dE9xZ",
                }
            ]
        },
    }


class VisitResponse(BaseModel):
    """One recorded visit."""

    ip: str
    timestamp: datetime
    useragent: str


class AnalyticsResponse(BaseModel):
    """Snapshot of a short link and its visits."""

    original_url: str = Field(..., alias="originalUrl")
    short_id: str = Field(..., alias="shortId")
    created_at: datetime = Field(..., alias="createdAt")
    expiration_date: Optional[datetime] = Field(None, alias="expirationDate")
    click_count: int = Field(..., alias="clickCount")
    expired: bool = Field(False, description="Whether the link is past its expiration")
    visits: List[VisitResponse] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    store: str = Field(..., description="Record store status")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Detailed error information")


class StatisticsResponse(BaseModel):
    """Statistics response."""

    total_links: int = Field(..., alias="totalLinks")
    total_clicks: int = Field(..., alias="totalClicks")
    store: str
    id_strategy: str = Field(..., alias="idStrategy")

    model_config = {"populate_by_name": True}
