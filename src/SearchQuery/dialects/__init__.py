"""Backend query dialects and their registry."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from SearchQuery.core.nodes import Node
from SearchQuery.core.parser import parse_query
from SearchQuery.core.rewrite import NO_REWRITE, TermRewrite
from SearchQuery.dialects.postgres import node_to_tsquery, to_postgres_tsquery
from SearchQuery.dialects.sqlite import node_to_fts5_query, to_sqlite_fts5_query


@dataclass(frozen=True, slots=True)
class Dialect:
    """A registered backend query syntax.

    Attributes:
        name: Registry key.
        serialize: Query tree to backend text.
        translate: Raw query to backend text, empty on empty or malformed input.
    """

    name: str
    serialize: Callable[[Node], str]
    translate: Callable[[str, TermRewrite], str]


def _dialects() -> dict[str, Dialect]:
    """Return dialect registry."""
    return {
        "postgres": Dialect("postgres", node_to_tsquery, to_postgres_tsquery),
        "sqlite": Dialect("sqlite", node_to_fts5_query, to_sqlite_fts5_query),
    }


def supported_dialects() -> tuple[str, ...]:
    """Return all dialect names in registry order."""
    return tuple(_dialects().keys())


def get_dialect(name: str) -> Dialect:
    """Look up a dialect by case-insensitive name.

    Raises:
        ValueError: If the dialect is not registered.
    """
    dialect = _dialects().get(name.strip().lower())
    if dialect is None:
        raise ValueError(f"Unsupported dialect: {name}")
    return dialect


def compile_query(query: str, dialect: str, rewrite: TermRewrite = NO_REWRITE) -> str | None:
    """Compile a query for a backend, keeping empty and malformed input apart.

    Args:
        query: User-typed query.
        dialect: Registered dialect name.
        rewrite: Term rewrite strategy.

    Returns:
        Backend query text, or None when no filter was requested (empty query
        or every term dropped by `rewrite`).

    Raises:
        ParseError: If the query is malformed.
        ValueError: If the dialect is unknown.
    """
    target = get_dialect(dialect)
    node = parse_query(query, rewrite)
    if node is None:
        return None
    return target.serialize(node)


def to_dialect_query(query: str, dialect: str, rewrite: TermRewrite = NO_REWRITE) -> str:
    """Lenient variant of `compile_query`: empty string for empty or malformed queries."""
    return get_dialect(dialect).translate(query, rewrite)


__all__ = [
    "Dialect",
    "compile_query",
    "get_dialect",
    "supported_dialects",
    "to_dialect_query",
    "to_postgres_tsquery",
    "to_sqlite_fts5_query",
]
