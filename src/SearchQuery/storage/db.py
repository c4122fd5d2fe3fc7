"""SQLite database utilities."""

from __future__ import annotations

import sqlite3
from pathlib import Path

from SearchQuery.utils.log import log


class DatabaseManager:
    """Owns one SQLite connection for a database path.

    Supports context manager protocol for automatic connection cleanup.
    """

    def __init__(self, db_path: Path) -> None:
        """Open (and create if needed) the database.

        Args:
            db_path: Absolute path or project-relative path to database file.
        """
        self.db_path = db_path
        self.conn: sqlite3.Connection | None = ensure_db(db_path)

    def get_connection(self) -> sqlite3.Connection:
        """Get the open database connection.

        Raises:
            RuntimeError: If the manager was already closed.
        """
        if self.conn is None:
            raise RuntimeError(f"Database connection is closed: {self.db_path}")
        return self.conn

    def close(self) -> None:
        """Close the database connection."""
        if self.conn is not None:
            self.conn.close()
            self.conn = None

    def __enter__(self) -> DatabaseManager:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def ensure_db(db_path: Path) -> sqlite3.Connection:
    """Ensure database file exists and return connection.

    Args:
        db_path: Absolute path or project-relative path to database file.

    Returns:
        SQLite connection.

    Raises:
        OSError: If directory creation fails.
        sqlite3.Error: If database connection fails.
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path))
    log.debug("Opened database: %s", db_path)
    return conn


def init_schema(conn: sqlite3.Connection, table: str) -> None:
    """Create the document table, its FTS5 index and the sync triggers.

    The FTS5 table `<table>_fts` is an external-content index over
    `<table>.data`, kept in sync by insert and delete triggers.

    Args:
        conn: SQLite connection.
        table: Document table name, already validated as an identifier.
    """
    fts = f"{table}_fts"
    conn.executescript(f"""
        CREATE TABLE IF NOT EXISTS {table} (
          id INTEGER PRIMARY KEY,
          data TEXT
        );

        CREATE VIRTUAL TABLE IF NOT EXISTS {fts}
          USING fts5(data, content='{table}', content_rowid='id');

        CREATE TRIGGER IF NOT EXISTS {table}_ai AFTER INSERT ON {table} BEGIN
          INSERT INTO {fts}(rowid, data) VALUES (new.id, new.data);
        END;

        CREATE TRIGGER IF NOT EXISTS {table}_ad AFTER DELETE ON {table} BEGIN
          INSERT INTO {fts}({fts}, rowid, data) VALUES ('delete', old.id, old.data);
        END;
    """)
    conn.commit()
