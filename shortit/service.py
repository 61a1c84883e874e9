"""Business logic service for the link service."""

import logging
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from .auth import AuthenticatedContext, RequestContext, owner_of
from .common.validators import is_valid_url
from .database.base import LinkStoreBase
from .database.models import LinkRecord
from .errors import (
    AccessDeniedError,
    AuthenticationRequiredError,
    ExpiredError,
    NotFoundError,
    PersistenceError,
    ShortCodeConflictError,
    ValidationError,
)
from .shortcode import ShortCodeGenerator


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ShortLinkService:
    """Service layer for link creation, redirects and owner operations."""

    def __init__(
        self,
        db: LinkStoreBase,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
        max_collision_retries: int = 10,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize link service.

        Args:
            db: Link store instance
            short_code_generator: Optional short code generator
            logger: Optional logger
            max_collision_retries: Maximum code allocation attempts per link
            clock: Optional source of the current UTC time
        """
        if max_collision_retries < 1:
            raise ValueError("max_collision_retries must be at least 1")

        self.db = db
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.max_collision_retries = max_collision_retries
        self.clock = clock or utc_now

    async def create_link(
        self,
        original_url: Optional[str],
        context: RequestContext,
        expires_at: Optional[datetime] = None,
    ) -> LinkRecord:
        """Create a new short link.

        Args:
            original_url: The destination URL
            context: Caller context; authenticated callers become the owner
            expires_at: Optional expiry, only set by administrative callers

        Returns:
            The stored link record

        Raises:
            ValidationError: If the URL is missing or malformed
            PersistenceError: If the store fails or no free code was found
        """
        is_valid, error = is_valid_url(original_url)
        if not is_valid:
            raise ValidationError(error)

        record = await self._allocate_and_insert(
            original_url=original_url,
            owner_id=owner_of(context),
            created_at=self.clock(),
            expires_at=expires_at,
        )

        self.logger.info(f"Created short URL: {record.short_code} -> {original_url}")
        return record

    async def resolve(self, short_code: str) -> str:
        """Resolve a short code for redirecting, counting the click.

        The increment is durable before the destination is returned.

        Raises:
            NotFoundError: If no record has this code
            ExpiredError: If the record's expiry has passed
        """
        now = self.clock()
        record = await self.db.increment_click_count(short_code, now)
        if record is not None:
            self.logger.debug(f"Resolved {short_code} (clicks={record.click_count})")
            return record.original_url

        existing = await self.db.get_by_short_code(short_code)
        if existing is not None and existing.is_expired(now):
            self.logger.info(f"Expired short code requested: {short_code}")
            raise ExpiredError()

        self.logger.warning(f"Short code not found: {short_code}")
        raise NotFoundError()

    async def lookup(self, short_code: str) -> str:
        """Get the destination for a short code without counting a click."""
        record = await self.db.get_by_short_code(short_code)
        if record is None:
            raise NotFoundError()
        if record.is_expired(self.clock()):
            raise ExpiredError()
        return record.original_url

    async def list_links(self, context: RequestContext) -> List[LinkRecord]:
        """List the caller's links, newest first."""
        identity = self._require_identity(context)
        return await self.db.list_by_owner(identity)

    async def get_stats(self, short_code: str, context: RequestContext) -> LinkRecord:
        """Get a link record for its owner, or for anyone when it has no owner.

        Raises:
            NotFoundError: If no record has this code
            AccessDeniedError: If the record is owned by someone else
        """
        record = await self.db.get_by_short_code(short_code)
        if record is None:
            raise NotFoundError()

        if record.owner_id is not None and not record.is_owned_by(owner_of(context)):
            raise AccessDeniedError()

        return record

    async def delete_link(self, link_id: int, context: RequestContext) -> None:
        """Delete one of the caller's links by id.

        Records without an owner never match and so cannot be deleted.

        Raises:
            AuthenticationRequiredError: If the caller is anonymous
            NotFoundError: If no record with this id belongs to the caller
        """
        identity = self._require_identity(context)

        deleted = await self.db.delete_owned(link_id, identity)
        if not deleted:
            raise NotFoundError("URL not found or access denied")

        self.logger.info(f"Deleted link {link_id} for {identity}")

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check."""
        db_healthy = await self.db.health_check()
        return {
            "database": db_healthy,
            "overall": db_healthy,
        }

    async def close(self) -> None:
        """Close service connections."""
        await self.db.close()

    @staticmethod
    def _require_identity(context: RequestContext) -> str:
        if not isinstance(context, AuthenticatedContext):
            raise AuthenticationRequiredError()
        return context.identity

    async def _allocate_and_insert(
        self,
        original_url: str,
        owner_id: Optional[str],
        created_at: datetime,
        expires_at: Optional[datetime],
    ) -> LinkRecord:
        """Generate a free short code and insert the record under it.

        The existence check only filters obvious collisions; the store's
        unique index decides, and a conflict on insert triggers another attempt.

        Raises:
            PersistenceError: If every attempt collided
        """
        for attempt in range(1, self.max_collision_retries + 1):
            code = self.generator.generate_random()

            if await self.db.short_code_exists(code):
                self.logger.debug(f"Short code collision on attempt {attempt}: {code}")
                continue

            try:
                return await self.db.insert_link(
                    short_code=code,
                    original_url=original_url,
                    created_at=created_at,
                    owner_id=owner_id,
                    expires_at=expires_at,
                )
            except ShortCodeConflictError:
                self.logger.debug(f"Short code taken at insert on attempt {attempt}: {code}")

        self.logger.error(
            f"Unable to allocate a short code after {self.max_collision_retries} attempts"
        )
        raise PersistenceError("Unable to generate a unique short code")
