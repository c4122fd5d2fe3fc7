"""Operator-precedence query parser.

Builds a binary query tree from tokens with two explicit stacks: one of
operands (tree nodes) and one of pending operators (`AND`, `OR` and `(`
markers).

Precedence rules:
- `AND` binds tighter than `OR`; both are left-associative.
- A pending `AND` is always reduced before pushing a new operator.
- A pending `OR` is reduced only before another `OR`; a new `AND` stacks
  above it so it groups with the following term.
- Operands left side by side after all operators are reduced are joined
  with implicit `AND`, left to right.
"""

from __future__ import annotations

from collections.abc import Sequence

from SearchQuery.core.errors import ParseError, ParseErrorKind
from SearchQuery.core.lexer import tokenize
from SearchQuery.core.nodes import And, Node, Or, Term
from SearchQuery.core.rewrite import NO_REWRITE, TermRewrite
from SearchQuery.core.tokens import Token, TokenKind
from SearchQuery.utils.log import query_log

_BINARY = {TokenKind.AND: And, TokenKind.OR: Or}


def _reduces_before(top: TokenKind, incoming: TokenKind) -> bool:
    """Return True if the pending `top` operator must be applied before `incoming`."""
    return top is TokenKind.AND or top is incoming


def _apply(operands: list[Node], operators: list[TokenKind]) -> None:
    """Pop one operator and two operands, push the combined node."""
    if len(operands) < 2 or not operators:
        raise ParseError(ParseErrorKind.INVALID_EXPRESSION)
    node_type = _BINARY[operators.pop()]
    right = operands.pop()
    left = operands.pop()
    operands.append(node_type(left, right))


def parse(tokens: Sequence[Token]) -> Node:
    """Parse a token sequence into a query tree.

    Args:
        tokens: Output of `tokenize`; anything after the first `EOF` is ignored.

    Returns:
        The single root node.

    Raises:
        ParseError: `MISMATCHED_PARENTHESES` for unbalanced parentheses,
            `INVALID_EXPRESSION` for a malformed operator/operand sequence,
            including an empty token sequence.
    """
    operands: list[Node] = []
    operators: list[TokenKind] = []

    for token in tokens:
        kind = token.kind
        if kind is TokenKind.EOF:
            break
        if kind is TokenKind.TERM:
            operands.append(Term(token.value))
        elif kind is TokenKind.LPAREN:
            operators.append(kind)
        elif kind is TokenKind.RPAREN:
            while operators and operators[-1] is not TokenKind.LPAREN:
                _apply(operands, operators)
            if not operators:
                raise ParseError(ParseErrorKind.MISMATCHED_PARENTHESES)
            operators.pop()
        else:
            while operators and operators[-1] is not TokenKind.LPAREN:
                if not _reduces_before(operators[-1], kind):
                    break
                _apply(operands, operators)
            operators.append(kind)

    while operators:
        if operators[-1] is TokenKind.LPAREN:
            raise ParseError(ParseErrorKind.MISMATCHED_PARENTHESES)
        _apply(operands, operators)

    if not operands:
        raise ParseError(ParseErrorKind.INVALID_EXPRESSION)

    # implicit AND
    root = operands[0]
    for right in operands[1:]:
        root = And(root, right)

    query_log.debug("Parsed %d tokens into %s", len(tokens), type(root).__name__)
    return root


def parse_query(query: str, rewrite: TermRewrite = NO_REWRITE) -> Node | None:
    """Tokenize and parse a raw query.

    Returns:
        Root node, or None when the query is empty or every term was dropped
        by `rewrite`.

    Raises:
        ParseError: If the query is malformed.
    """
    if not query:
        return None
    tokens = tokenize(query, rewrite)
    if len(tokens) == 1 and tokens[0].kind is TokenKind.EOF:
        return None
    return parse(tokens)
