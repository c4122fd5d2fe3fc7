"""PostgreSQL `tsquery` compiler.

Compiles a query tree into text for `to_tsquery('simple', ...)`.

Rules
- AND -> `(left & right)`, OR -> `(left | right)`; every binary node is
  parenthesized.
- A phrase (term containing a space) becomes its words joined with the
  FOLLOWED-BY operator: `quick <-> brown <-> fox`.
- Each word loses one layer of surrounding double quotes, embedded single
  quotes are doubled, and the word is wrapped in single quotes when it holds
  anything outside `[A-Za-z0-9_]`.
"""

from __future__ import annotations

import re

from SearchQuery.core.errors import ParseError
from SearchQuery.core.nodes import Node, fold_tree
from SearchQuery.core.parser import parse_query
from SearchQuery.core.rewrite import NO_REWRITE, TermRewrite
from SearchQuery.dialects.common import is_phrase, split_words, strip_outer_quotes
from SearchQuery.utils.log import query_log

_RE_NEEDS_QUOTE = re.compile(r"[^A-Za-z0-9_]")


def escape_tsquery_word(word: str) -> str:
    """Escape a single word as a `tsquery` operand."""
    escaped = strip_outer_quotes(word).replace("'", "''")
    if _RE_NEEDS_QUOTE.search(escaped):
        return f"'{escaped}'"
    return escaped


def _compile_term(phrase: str) -> str:
    if is_phrase(phrase):
        return " <-> ".join(escape_tsquery_word(word) for word in split_words(phrase))
    return escape_tsquery_word(phrase)


def node_to_tsquery(node: Node) -> str:
    """Serialize a query tree into `tsquery` syntax."""
    return fold_tree(
        node,
        on_term=_compile_term,
        on_and=lambda left, right: f"({left} & {right})",
        on_or=lambda left, right: f"({left} | {right})",
    )


def to_postgres_tsquery(query: str, rewrite: TermRewrite = NO_REWRITE) -> str:
    """Compile a raw query into `tsquery` text.

    Args:
        query: User-typed query.
        rewrite: Term rewrite strategy.

    Returns:
        `tsquery` text, or an empty string for an empty or malformed query.
    """
    try:
        node = parse_query(query, rewrite)
    except ParseError as error:
        query_log.debug("tsquery compilation dropped malformed query=%r error=%s", query, error)
        return ""
    if node is None:
        return ""
    return node_to_tsquery(node)


def tsquery_predicate(column: str, config_name: str = "simple") -> str:
    """Return a parameterized `WHERE` fragment for a `tsvector` column.

    The placeholder takes the output of `to_postgres_tsquery`.

    Args:
        column: `tsvector` column expression.
        config_name: Text search configuration; `simple` applies no stemming.

    Returns:
        SQL fragment using the `%s` paramstyle.
    """
    if not re.fullmatch(r"[A-Za-z_][A-Za-z0-9_.]*", column):
        raise ValueError(f"Invalid column name: {column}")
    if not re.fullmatch(r"[A-Za-z_][A-Za-z0-9_]*", config_name):
        raise ValueError(f"Invalid text search config: {config_name}")
    return f"{column} @@ to_tsquery('{config_name}', %s)"
