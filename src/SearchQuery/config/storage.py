"""Storage domain configuration for the SQLite FTS5 document store."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from SearchQuery.config.common import (
    expect_identifier,
    expect_str,
    get_required_value,
    get_section,
)

DB_PATH_ENV = "SEARCHQUERY_DB_PATH"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """Storage configuration."""

    db_path: str
    table: str


def load_storage(raw: Mapping[str, Any]) -> StorageConfig:
    """Load storage domain config from raw mapping.

    The `SEARCHQUERY_DB_PATH` environment variable, when set, overrides
    `storage.db_path`.
    """
    section = get_section(raw, "storage", required=True)
    db_path = expect_str(get_required_value(section, "db_path", "storage.db_path"), "storage.db_path")
    return StorageConfig(
        db_path=os.environ.get(DB_PATH_ENV) or db_path,
        table=expect_identifier(get_required_value(section, "table", "storage.table"), "storage.table"),
    )


def check_storage(config: StorageConfig) -> None:
    """Validate storage domain constraints."""
    if not config.db_path.strip():
        raise ValueError("storage.db_path must not be empty")
