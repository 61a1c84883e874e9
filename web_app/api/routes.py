"""API routes implementation."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from shortit.auth import AuthenticatedContext, RequestContext
from shortit.database.models import LinkRecord
from shortit.errors import NotFoundError
from shortit.service import ShortLinkService

from .dependencies import get_service, optional_auth, require_auth, short_url_for
from .schemas import (
    DeleteResponse,
    ErrorResponse,
    HealthResponse,
    LinkListResponse,
    LinkStats,
    LinkStatsResponse,
    OwnedLink,
    ShortenData,
    ShortenRequest,
    ShortenResponse,
)

router = APIRouter()

# Largest BIGSERIAL value
MAX_LINK_ID = 2**63 - 1


def _link_stats(request: Request, record: LinkRecord) -> LinkStats:
    return LinkStats(
        original_url=record.original_url,
        short_code=record.short_code,
        short_url=short_url_for(request, record.short_code),
        click_count=record.click_count,
        created_at=record.created_at,
        expires_at=record.expires_at,
    )


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid URL"},
        500: {"model": ErrorResponse, "description": "Storage error"},
    },
    summary="Create short URL",
    description="Create a short URL. Authenticated callers become the link owner.",
)
async def shorten_url(
    request: Request,
    body: ShortenRequest,
    context: RequestContext = Depends(optional_auth),
    service: ShortLinkService = Depends(get_service),
):
    """Create a shortened URL."""
    record = await service.create_link(body.original_url, context)

    return ShortenResponse(
        data=ShortenData(
            original_url=record.original_url,
            short_code=record.short_code,
            short_url=short_url_for(request, record.short_code),
            created_at=record.created_at,
        )
    )


@router.get(
    "/urls/my",
    response_model=LinkListResponse,
    responses={401: {"model": ErrorResponse, "description": "Not authenticated"}},
    summary="List my URLs",
    description="List the caller's short URLs, newest first.",
)
async def list_my_urls(
    request: Request,
    context: AuthenticatedContext = Depends(require_auth),
    service: ShortLinkService = Depends(get_service),
):
    records = await service.list_links(context)

    data = [
        OwnedLink(id=record.id, **_link_stats(request, record).model_dump())
        for record in records
    ]
    return LinkListResponse(count=len(data), data=data)


@router.get(
    "/urls/stats/{short_code}",
    response_model=LinkStatsResponse,
    responses={
        403: {"model": ErrorResponse, "description": "Owned by another user"},
        404: {"model": ErrorResponse, "description": "Short code not found"},
    },
    summary="Get URL statistics",
)
async def get_url_stats(
    request: Request,
    short_code: str,
    context: RequestContext = Depends(optional_auth),
    service: ShortLinkService = Depends(get_service),
):
    record = await service.get_stats(short_code, context)
    return LinkStatsResponse(data=_link_stats(request, record))


@router.delete(
    "/urls/{link_id}",
    response_model=DeleteResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Not found or not owner"},
    },
    summary="Delete URL",
)
async def delete_url(
    link_id: str,
    context: AuthenticatedContext = Depends(require_auth),
    service: ShortLinkService = Depends(get_service),
):
    await service.delete_link(_parse_link_id(link_id), context)
    return DeleteResponse()


def _parse_link_id(link_id: str) -> int:
    """Parse a path id; ids that cannot exist are reported like foreign ones."""
    if not (link_id.isascii() and link_id.isdigit()):
        raise NotFoundError("URL not found or access denied")

    value = int(link_id)
    if not 1 <= value <= MAX_LINK_ID:
        raise NotFoundError("URL not found or access denied")
    return value


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse, "description": "Store unavailable"}},
    summary="Health check",
)
async def health_check(service: ShortLinkService = Depends(get_service)):
    """Health check endpoint for load balancers and monitoring."""
    health = await service.health_check()

    body = HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        database="healthy" if health["database"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )
    if not health["overall"]:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=body.model_dump(mode="json", by_alias=True),
        )
    return body
