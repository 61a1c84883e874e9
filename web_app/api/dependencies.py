"""FastAPI dependencies shared by the routers."""

from fastapi import Request

from shortit.auth import ANONYMOUS, AuthenticatedContext, RequestContext
from shortit.common.headers import build_base_url
from shortit.common.url_builder import build_short_url
from shortit.errors import AuthenticationRequiredError
from shortit.service import ShortLinkService


def get_service(request: Request) -> ShortLinkService:
    return request.app.state.service


def optional_auth(request: Request) -> RequestContext:
    """Caller context, anonymous when no valid token was presented."""
    return getattr(request.state, "auth", ANONYMOUS)


def require_auth(request: Request) -> AuthenticatedContext:
    """Caller context for routes that need an identity."""
    context = optional_auth(request)
    if not isinstance(context, AuthenticatedContext):
        raise AuthenticationRequiredError()
    return context


def short_url_for(request: Request, short_code: str) -> str:
    """Derive the public short URL for short_code from the current request."""
    config = request.app.state.config
    base_url = build_base_url(
        headers=dict(request.headers),
        fallback_base_url=config.base_url,
        request_scheme=request.url.scheme,
        request_host=request.headers.get("host"),
    )
    return build_short_url(
        short_code=short_code,
        base_url=base_url,
        path_prefix=config.path_prefix,
    )
