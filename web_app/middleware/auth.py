"""Request identity middleware."""

from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from shortit.auth import ANONYMOUS


class AuthContextMiddleware(BaseHTTPMiddleware):
    """Resolve the Authorization header into request.state.auth."""

    async def dispatch(self, request: Request, call_next: Callable):
        resolver = getattr(request.app.state, "identity_resolver", None)
        if resolver is None:
            request.state.auth = ANONYMOUS
        else:
            request.state.auth = resolver.resolve(request.headers.get("authorization"))

        return await call_next(request)
