"""Storage layer for the link service."""

from .base import LinkStoreBase
from .factory import create_link_store
from .memory import MemoryLinkStore
from .models import LinkRecord
from .postgres import PostgresLinkStore

__all__ = [
    "LinkStoreBase",
    "LinkRecord",
    "MemoryLinkStore",
    "PostgresLinkStore",
    "create_link_store",
]
