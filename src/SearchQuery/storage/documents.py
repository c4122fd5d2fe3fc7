"""Document store backed by an SQLite FTS5 index."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from SearchQuery.core.rewrite import NO_REWRITE, TermRewrite
from SearchQuery.dialects import compile_query
from SearchQuery.storage.db import init_schema
from SearchQuery.utils.log import log, query_log

if TYPE_CHECKING:
    from SearchQuery.storage.db import DatabaseManager


@dataclass(frozen=True, slots=True)
class Document:
    """One stored row."""

    id: int
    data: str


class DocumentStore:
    """Stores text rows and searches them with the query language."""

    def __init__(self, db_manager: DatabaseManager, table: str = "example") -> None:
        """Initialize the store and create its schema.

        Args:
            db_manager: Shared database manager instance.
            table: Document table name, validated by config loading.
        """
        log.debug("Initializing DocumentStore table=%s", table)
        self.conn = db_manager.get_connection()
        self.table = table
        self.fts_table = f"{table}_fts"
        init_schema(self.conn, table)

    def reset(self) -> None:
        """Delete every stored row and its index entries."""
        self.conn.execute(f"DELETE FROM {self.table}")
        self.conn.commit()

    def add(self, texts: Iterable[str]) -> int:
        """Insert texts as new rows.

        Returns:
            Number of inserted rows.
        """
        rows = [(text,) for text in texts]
        if not rows:
            return 0
        with self.conn:
            self.conn.executemany(f"INSERT INTO {self.table}(data) VALUES (?)", rows)
        log.debug("Inserted %d rows into %s", len(rows), self.table)
        return len(rows)

    def list_all(self) -> list[Document]:
        """Return every stored row ordered by id."""
        cursor = self.conn.execute(f"SELECT id, data FROM {self.table} ORDER BY id")
        return [Document(id=row[0], data=row[1]) for row in cursor]

    def search(self, query: str, rewrite: TermRewrite = NO_REWRITE) -> list[Document]:
        """Return rows matching a query, ordered by id.

        An empty query (or one reduced to nothing by `rewrite`) returns every
        row.

        Raises:
            ParseError: If the query is malformed.
            sqlite3.OperationalError: If FTS5 rejects the compiled expression.
        """
        fts_query = compile_query(query, "sqlite", rewrite)
        if fts_query is None:
            return self.list_all()
        query_log.debug("FTS5 MATCH %r for query %r", fts_query, query)
        cursor = self.conn.execute(
            f"SELECT rowid, data FROM {self.fts_table} WHERE data MATCH ? ORDER BY rowid",
            (fts_query,),
        )
        return [Document(id=row[0], data=row[1]) for row in cursor]
