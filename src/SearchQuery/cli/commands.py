"""Command implementations for the SearchQuery CLI.

Each command holds its inputs and injected dependencies and writes results
through an `emit` callable, keeping business logic apart from click
parameter handling.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from SearchQuery.core.evaluate import match
from SearchQuery.core.rewrite import TermRewrite
from SearchQuery.dialects import compile_query
from SearchQuery.services.grep import grep_tree
from SearchQuery.storage.documents import Document, DocumentStore
from SearchQuery.utils.log import log

Emit = Callable[[str], None]


def _render_documents(documents: Sequence[Document], emit: Emit) -> None:
    for document in documents:
        emit(f"ID: {document.id}, Data: {document.data}")


@dataclass(slots=True)
class MatchCommand:
    """Evaluate a query against one content string."""

    query: str
    content: str
    rewrite: TermRewrite

    def execute(self, emit: Emit) -> None:
        matched, error = match(self.content, self.query, self.rewrite)
        if error is not None:
            raise error
        emit("true" if matched else "false")


@dataclass(slots=True)
class CompileCommand:
    """Print the backend translation of a query."""

    query: str
    dialect: str
    rewrite: TermRewrite

    def execute(self, emit: Emit) -> None:
        compiled = compile_query(self.query, self.dialect, self.rewrite)
        if compiled is None:
            log.info("Empty query: no %s filter needed", self.dialect)
            return
        emit(compiled)


@dataclass(slots=True)
class GrepCommand:
    """Print `path:line:text` for every matching line under a directory."""

    query: str
    root: Path
    skip_hidden: bool
    rewrite: TermRewrite

    def execute(self, emit: Emit) -> None:
        count = 0
        for hit in grep_tree(self.root, self.query, self.rewrite, skip_hidden=self.skip_hidden):
            emit(hit.render())
            count += 1
        log.debug("grep matched %d lines under %s", count, self.root)


@dataclass(slots=True)
class IndexCommand:
    """Replace the stored documents with the given texts."""

    store: DocumentStore
    texts: Sequence[str]

    def execute(self, emit: Emit) -> None:
        self.store.reset()
        inserted = self.store.add(self.texts)
        log.info("Indexed %d documents", inserted)


@dataclass(slots=True)
class ListCommand:
    """Print every stored document."""

    store: DocumentStore

    def execute(self, emit: Emit) -> None:
        _render_documents(self.store.list_all(), emit)


@dataclass(slots=True)
class SearchCommand:
    """Print stored documents matching a query via the FTS5 index."""

    store: DocumentStore
    query: str
    rewrite: TermRewrite

    def execute(self, emit: Emit) -> None:
        documents = self.store.search(self.query, self.rewrite)
        log.info("Found %d documents", len(documents))
        _render_documents(documents, emit)
