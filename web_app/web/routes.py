"""Short link redirect route."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse

from shortit.service import ShortLinkService

from ..api.dependencies import get_service

router = APIRouter()


@router.get("/{short_code}", include_in_schema=False)
async def redirect_to_url(
    short_code: str,
    service: ShortLinkService = Depends(get_service),
):
    """Redirect to the original URL, counting the click first."""
    original_url = await service.resolve(short_code)

    # 302 so every visit comes back through the counter
    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)
