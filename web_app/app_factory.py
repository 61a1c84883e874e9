"""FastAPI application factory."""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shortit.auth import StaticTokenResolver
from shortit.service import ShortLinkService

from .api import api_router
from .errors import register_exception_handlers
from .middleware.auth import AuthContextMiddleware
from .middleware.logging import LoggingMiddleware
from .web import web_router


def create_app(
    service_instance: Optional[ShortLinkService],
    config,
    identity_resolver: Optional[StaticTokenResolver] = None,
    lifespan=None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        service_instance: Service instance (may be set later by the lifespan)
        config: Configuration instance
        identity_resolver: Resolver for bearer tokens (built from config if omitted)
        lifespan: Optional lifespan context manager

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="shortit",
        description="URL shortening service",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )

    # Explicit context for handlers, read through request.app.state
    app.state.service = service_instance
    app.state.config = config
    app.state.identity_resolver = identity_resolver or StaticTokenResolver(config.api_tokens)

    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(AuthContextMiddleware)
    app.add_middleware(LoggingMiddleware)

    # Served under /api and at the root; the redirect catch-all goes last
    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(api_router, include_in_schema=False)
    app.include_router(web_router, tags=["Redirect"])

    return app
