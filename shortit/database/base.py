"""Abstract base class for link store implementations."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from .models import LinkRecord


class LinkStoreBase(ABC):
    """Abstract base class for link store operations.

    Implementations raise ``PersistenceError`` when the backing store fails and
    ``ShortCodeConflictError`` when an insert violates short_code uniqueness.
    """

    def __init__(self, db_config: str):
        """Initialize store.

        Args:
            db_config: Store connection string
        """
        self.db_config = db_config

    @abstractmethod
    async def insert_link(
        self,
        short_code: str,
        original_url: str,
        created_at: datetime,
        owner_id: Optional[str] = None,
        expires_at: Optional[datetime] = None,
    ) -> LinkRecord:
        """Insert a new link record with click_count 0.

        Returns:
            The stored record, including its store-generated id

        Raises:
            ShortCodeConflictError: If short_code is already taken
        """

    @abstractmethod
    async def short_code_exists(self, short_code: str) -> bool:
        """Check if a short code is already assigned."""

    @abstractmethod
    async def get_by_short_code(self, short_code: str) -> Optional[LinkRecord]:
        """Get the record for a short code, or None."""

    @abstractmethod
    async def increment_click_count(
        self, short_code: str, now: datetime
    ) -> Optional[LinkRecord]:
        """Atomically add one click to a record that is not expired at now.

        Args:
            short_code: The short code to update
            now: Reference time for the expiry check

        Returns:
            The updated record, or None when no live record matched
        """

    @abstractmethod
    async def list_by_owner(self, owner_id: str) -> List[LinkRecord]:
        """List an owner's records, newest first."""

    @abstractmethod
    async def delete_owned(self, link_id: int, owner_id: str) -> bool:
        """Delete the record with link_id when owner_id matches.

        Returns:
            True if deleted, False if no such record for that owner
        """

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is reachable."""

    @abstractmethod
    async def close(self) -> None:
        """Release store resources."""
