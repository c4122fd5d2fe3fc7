"""Storage layer for SearchQuery.

Provides the SQLite connection manager and the FTS5-backed document store.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from SearchQuery.storage.db import DatabaseManager
from SearchQuery.storage.documents import Document, DocumentStore
from SearchQuery.utils.log import log

if TYPE_CHECKING:
    from SearchQuery.config import AppConfig


def create_storage(config: AppConfig) -> tuple[DatabaseManager, DocumentStore]:
    """Create database manager and document store from config.

    Args:
        config: Application configuration containing storage settings.

    Returns:
        Tuple of (db_manager, document_store).
    """
    db_path = Path(config.storage.db_path)
    db_manager = DatabaseManager(db_path)
    store = DocumentStore(db_manager, table=config.storage.table)
    log.info("Document store: %s (table=%s)", db_path, config.storage.table)
    return db_manager, store


__all__ = [
    "DatabaseManager",
    "Document",
    "DocumentStore",
    "create_storage",
]
