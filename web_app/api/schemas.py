"""Pydantic schemas for API requests and responses.

Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ShortenRequest(CamelModel):
    """Request to shorten a URL."""

    # Optional here so a missing URL reaches the service's validation message
    original_url: Optional[str] = Field(None, description="The URL to shorten")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {"originalUrl": "https://example.com/very/long/path/to/resource"},
            ]
        },
    )


class ShortenData(CamelModel):
    original_url: str
    short_code: str
    short_url: str
    created_at: datetime


class ShortenResponse(CamelModel):
    """Response after shortening a URL."""

    success: bool = True
    message: str = "Short URL created successfully"
    data: ShortenData


class LinkStats(CamelModel):
    """Public view of a link record."""

    original_url: str
    short_code: str
    short_url: str
    click_count: int
    created_at: datetime
    expires_at: Optional[datetime] = None


class OwnedLink(LinkStats):
    id: int


class LinkListResponse(CamelModel):
    success: bool = True
    count: int
    data: List[OwnedLink]


class LinkStatsResponse(CamelModel):
    success: bool = True
    data: LinkStats


class DeleteResponse(CamelModel):
    success: bool = True
    message: str = "Short URL deleted successfully"


class ErrorResponse(CamelModel):
    """Error envelope."""

    success: bool = False
    message: str = Field(..., description="Human-readable error message")


class HealthResponse(CamelModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    database: str = Field(..., description="Database status")
    timestamp: datetime = Field(..., description="Check timestamp")
