"""In-process link store, used for tests and single-process local runs."""

import asyncio
import itertools
import logging
from dataclasses import replace
from datetime import datetime
from typing import Dict, List, Optional

from ..errors import ShortCodeConflictError
from .base import LinkStoreBase
from .models import LinkRecord, ensure_utc


class MemoryLinkStore(LinkStoreBase):
    """Dictionary-backed store with a unique short_code index.

    Mutations run under one asyncio lock so each update is atomic with
    respect to other coroutines on the same loop.
    """

    def __init__(self, db_config: str = "memory://", logger: Optional[logging.Logger] = None):
        super().__init__(db_config)
        self.logger = logger or logging.getLogger(__name__)
        self._records: Dict[int, LinkRecord] = {}
        self._by_code: Dict[str, int] = {}
        self._ids = itertools.count(1)
        self._lock = asyncio.Lock()

    async def insert_link(
        self,
        short_code: str,
        original_url: str,
        created_at: datetime,
        owner_id: Optional[str] = None,
        expires_at: Optional[datetime] = None,
    ) -> LinkRecord:
        async with self._lock:
            if short_code in self._by_code:
                raise ShortCodeConflictError(f"Short code '{short_code}' already exists")

            record = LinkRecord(
                id=next(self._ids),
                original_url=original_url,
                short_code=short_code,
                created_at=ensure_utc(created_at),
                owner_id=owner_id,
                click_count=0,
                expires_at=ensure_utc(expires_at),
            )
            self._records[record.id] = record
            self._by_code[short_code] = record.id

        self.logger.debug(f"Stored link {record.id}: {short_code}")
        return replace(record)

    async def short_code_exists(self, short_code: str) -> bool:
        return short_code in self._by_code

    async def get_by_short_code(self, short_code: str) -> Optional[LinkRecord]:
        link_id = self._by_code.get(short_code)
        if link_id is None:
            return None
        return replace(self._records[link_id])

    async def increment_click_count(
        self, short_code: str, now: datetime
    ) -> Optional[LinkRecord]:
        async with self._lock:
            link_id = self._by_code.get(short_code)
            if link_id is None:
                return None

            record = self._records[link_id]
            if record.is_expired(now):
                return None

            record.click_count += 1
            return replace(record)

    async def list_by_owner(self, owner_id: str) -> List[LinkRecord]:
        owned = [r for r in self._records.values() if r.owner_id == owner_id]
        # Newest first; id breaks ties between equal timestamps
        owned.sort(key=lambda r: (r.created_at, r.id), reverse=True)
        return [replace(r) for r in owned]

    async def delete_owned(self, link_id: int, owner_id: str) -> bool:
        async with self._lock:
            record = self._records.get(link_id)
            if record is None or record.owner_id is None or record.owner_id != owner_id:
                return False

            del self._records[link_id]
            del self._by_code[record.short_code]
            return True

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        self.logger.debug("Memory store closed")
