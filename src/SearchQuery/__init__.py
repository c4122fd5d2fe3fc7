"""SearchQuery: a boolean full-text query language.

Parses user queries (terms, quoted phrases, AND/OR, parentheses, implicit
AND) and either evaluates them against text or compiles them into
PostgreSQL `tsquery` or SQLite FTS5 `MATCH` syntax.
"""

from __future__ import annotations

from SearchQuery.core.errors import ParseError, ParseErrorKind
from SearchQuery.core.evaluate import evaluate, match
from SearchQuery.core.lexer import tokenize
from SearchQuery.core.nodes import And, Node, Or, Term
from SearchQuery.core.parser import parse, parse_query
from SearchQuery.core.rewrite import NO_REWRITE, TermRewrite
from SearchQuery.core.tokens import Token, TokenKind
from SearchQuery.dialects import compile_query, supported_dialects, to_dialect_query
from SearchQuery.dialects.postgres import to_postgres_tsquery
from SearchQuery.dialects.sqlite import to_sqlite_fts5_query

__all__ = [
    "And",
    "NO_REWRITE",
    "Node",
    "Or",
    "ParseError",
    "ParseErrorKind",
    "Term",
    "TermRewrite",
    "Token",
    "TokenKind",
    "compile_query",
    "evaluate",
    "match",
    "parse",
    "parse_query",
    "supported_dialects",
    "to_dialect_query",
    "to_postgres_tsquery",
    "to_sqlite_fts5_query",
    "tokenize",
]
