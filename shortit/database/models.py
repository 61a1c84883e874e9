"""Data models for the link store."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Optional


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Return value as an aware UTC datetime (naive values are taken as UTC)."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass
class LinkRecord:
    """A short code -> destination mapping."""

    id: int
    original_url: str
    short_code: str
    created_at: datetime
    owner_id: Optional[str] = None
    click_count: int = 0
    expires_at: Optional[datetime] = None

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """True when expires_at is set and strictly before now."""
        if self.expires_at is None:
            return False
        now = now or datetime.now(timezone.utc)
        return ensure_utc(self.expires_at) < ensure_utc(now)

    def is_owned_by(self, identity: Optional[str]) -> bool:
        return self.owner_id is not None and self.owner_id == identity

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "original_url": self.original_url,
            "short_code": self.short_code,
            "owner_id": self.owner_id,
            "click_count": self.click_count,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "expires_at": self.expires_at.isoformat() if self.expires_at else None,
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "LinkRecord":
        """Create from a database row or mapping."""
        return cls(
            id=row["id"],
            original_url=row["original_url"],
            short_code=row["short_code"],
            owner_id=row["owner_id"],
            click_count=row["click_count"],
            created_at=ensure_utc(row["created_at"]),
            expires_at=ensure_utc(row["expires_at"]),
        )
