"""Build a link store from a connection URL."""

import logging
from typing import Optional
from urllib.parse import urlparse

from .base import LinkStoreBase
from .memory import MemoryLinkStore
from .postgres import PostgresLinkStore

POSTGRES_SCHEMES = ("postgres", "postgresql")


def create_link_store(
    database_url: str,
    pool_max_size: int = 10,
    create_tables: bool = False,
    logger: Optional[logging.Logger] = None,
) -> LinkStoreBase:
    """Create the store named by database_url's scheme.

    ``memory://`` gives an in-process store; ``postgresql://`` a PostgreSQL one.
    """
    scheme = urlparse(database_url).scheme.lower()

    if scheme == "memory":
        return MemoryLinkStore(database_url, logger=logger)

    if scheme in POSTGRES_SCHEMES:
        return PostgresLinkStore(
            db_config=database_url,
            pool_max_size=pool_max_size,
            create_tables=create_tables,
            logger=logger,
        )

    raise ValueError(f"Unsupported database URL scheme: '{scheme}'")
