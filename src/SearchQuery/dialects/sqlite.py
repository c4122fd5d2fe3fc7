"""SQLite FTS5 `MATCH` compiler.

Rules
- AND -> `left AND right`, OR -> `left OR right`; no parentheses are added,
  FTS5's own precedence (AND before OR) applies.
- A phrase (term containing a space) loses one layer of surrounding double
  quotes and is wrapped in double quotes as-is.
- A single word containing `"` or `*` has its double quotes doubled and is
  wrapped in double quotes; other words are emitted unchanged.
"""

from __future__ import annotations

from SearchQuery.core.errors import ParseError
from SearchQuery.core.nodes import Node, fold_tree
from SearchQuery.core.parser import parse_query
from SearchQuery.core.rewrite import NO_REWRITE, TermRewrite
from SearchQuery.dialects.common import is_phrase, strip_outer_quotes
from SearchQuery.utils.log import query_log

_FTS5_SPECIAL = ('"', "*")


def escape_fts5_word(word: str) -> str:
    """Escape a single word as an FTS5 operand."""
    word = strip_outer_quotes(word)
    if any(char in word for char in _FTS5_SPECIAL):
        return '"' + word.replace('"', '""') + '"'
    return word


def _compile_term(phrase: str) -> str:
    if is_phrase(phrase):
        # Inner double quotes are not escaped here.
        return '"' + strip_outer_quotes(phrase) + '"'
    return escape_fts5_word(phrase)


def node_to_fts5_query(node: Node) -> str:
    """Serialize a query tree into FTS5 `MATCH` syntax."""
    return fold_tree(
        node,
        on_term=_compile_term,
        on_and=lambda left, right: f"{left} AND {right}",
        on_or=lambda left, right: f"{left} OR {right}",
    )


def to_sqlite_fts5_query(query: str, rewrite: TermRewrite = NO_REWRITE) -> str:
    """Compile a raw query into an FTS5 `MATCH` expression.

    Args:
        query: User-typed query.
        rewrite: Term rewrite strategy.

    Returns:
        FTS5 expression, or an empty string for an empty or malformed query.
    """
    try:
        node = parse_query(query, rewrite)
    except ParseError as error:
        query_log.debug("FTS5 compilation dropped malformed query=%r error=%s", query, error)
        return ""
    if node is None:
        return ""
    return node_to_fts5_query(node)
