"""In-memory query evaluation against a text buffer."""

from __future__ import annotations

import string

from SearchQuery.core.errors import ParseError
from SearchQuery.core.nodes import Node, fold_tree
from SearchQuery.core.parser import parse_query
from SearchQuery.core.rewrite import NO_REWRITE, TermRewrite
from SearchQuery.utils.log import query_log

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(text: str) -> str:
    """Lowercase ASCII letters only, leaving every other character unchanged."""
    return text.translate(_ASCII_LOWER)


def _evaluate_folded(node: Node, folded: str) -> bool:
    return fold_tree(
        node,
        on_term=lambda phrase: ascii_lower(phrase) in folded,
        on_and=lambda left, right: left and right,
        on_or=lambda left, right: left or right,
    )


def evaluate(node: Node, content: str) -> bool:
    """Return True if `content` satisfies the query tree.

    Terms match as case-insensitive contiguous substrings, so a phrase must
    appear verbatim including its inner whitespace.

    Args:
        node: Root of a parsed query.
        content: Text to test.

    Returns:
        Match result.
    """
    return _evaluate_folded(node, ascii_lower(content))


def match(content: str, query: str, rewrite: TermRewrite = NO_REWRITE) -> tuple[bool, ParseError | None]:
    """Match `content` against a raw query string.

    An empty query, or one whose terms were all dropped by `rewrite`,
    matches everything.

    Args:
        content: Text to test.
        query: User-typed query.
        rewrite: Term rewrite strategy.

    Returns:
        `(matched, error)`; on a malformed query `matched` is False and
        `error` holds the parse failure.
    """
    try:
        node = parse_query(query, rewrite)
    except ParseError as error:
        query_log.debug("Query parse failed: query=%r error=%s", query, error)
        return False, error
    if node is None:
        return True, None
    return evaluate(node, content), None
