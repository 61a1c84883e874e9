"""Pytest configuration and fixtures."""

from typing import AsyncGenerator, Iterable

import pytest
from httpx import ASGITransport, AsyncClient

from config import Config
from shortit.auth import AuthenticatedContext, StaticTokenResolver
from shortit.common.logging_config import setup_logging
from shortit.database.memory import MemoryLinkStore
from shortit.service import ShortLinkService
from shortit.shortcode import ShortCodeGenerator
from web_app import create_app

TOKENS = {
    "alice-token": "alice",
    "bob-token": "bob",
}


class ScriptedGenerator(ShortCodeGenerator):
    """Generator that hands out a fixed sequence of codes."""

    def __init__(self, codes: Iterable[str]):
        super().__init__(default_length=8)
        self._codes = iter(codes)

    def generate_random(self, length=None) -> str:
        return next(self._codes)


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def store(logger) -> MemoryLinkStore:
    return MemoryLinkStore(logger=logger)


@pytest.fixture
def short_code_generator():
    return ShortCodeGenerator(default_length=8)


@pytest.fixture
def service(store, short_code_generator, logger) -> ShortLinkService:
    return ShortLinkService(
        db=store,
        short_code_generator=short_code_generator,
        logger=logger,
    )


@pytest.fixture
def make_service(store, logger):
    """Build a service whose allocator draws codes from a fixed sequence."""

    def _make(codes: Iterable[str], max_collision_retries: int = 10, db=None) -> ShortLinkService:
        return ShortLinkService(
            db=db or store,
            short_code_generator=ScriptedGenerator(codes),
            logger=logger,
            max_collision_retries=max_collision_retries,
        )

    return _make


@pytest.fixture
def alice():
    return AuthenticatedContext(identity="alice")


@pytest.fixture
def bob():
    return AuthenticatedContext(identity="bob")


@pytest.fixture
def config():
    return Config(
        database_url="memory://",
        base_url="http://testserver",
        api_tokens=TOKENS,
    )


@pytest.fixture
def app(service, config, logger):
    """Create test FastAPI app."""
    return create_app(
        service_instance=service,
        config=config,
        identity_resolver=StaticTokenResolver(config.api_tokens, logger=logger),
    )


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def auth_headers():
    """Authorization headers per user."""
    return {
        user: {"Authorization": f"Bearer {token}"}
        for token, user in TOKENS.items()
    }


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/a",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
