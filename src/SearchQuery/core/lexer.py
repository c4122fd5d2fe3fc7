"""Query tokenizer.

Lexing never fails: an unterminated quote swallows the rest of the input as
one phrase instead of raising.
"""

from __future__ import annotations

from SearchQuery.core.rewrite import NO_REWRITE, TermRewrite
from SearchQuery.core.tokens import Token, TokenKind

WHITESPACE = frozenset(" \t\n\r\f\v")
_TERM_STOP = WHITESPACE | {"(", ")"}
_KEYWORDS: tuple[tuple[str, TokenKind], ...] = (
    ("AND", TokenKind.AND),
    ("OR", TokenKind.OR),
)


def _keyword_at(text: str, pos: int) -> tuple[TokenKind, int] | None:
    """Return the keyword kind and its end offset if one starts at `pos`.

    Keywords are case-sensitive and must be followed by end of input,
    whitespace, or a parenthesis.
    """
    for word, kind in _KEYWORDS:
        end = pos + len(word)
        if text.startswith(word, pos) and (end == len(text) or text[end] in _TERM_STOP):
            return kind, end
    return None


def tokenize(text: str, rewrite: TermRewrite = NO_REWRITE) -> list[Token]:
    """Split a raw query into tokens.

    Args:
        text: User-typed query.
        rewrite: Strategy applied to each term or phrase; an empty result
            drops the token.

    Returns:
        Tokens in input order, always terminated by a single `EOF` token.
    """
    tokens: list[Token] = []

    def emit_term(raw: str) -> None:
        term = rewrite(raw)
        if term:
            tokens.append(Token(TokenKind.TERM, term))

    pos = 0
    size = len(text)
    while pos < size:
        char = text[pos]
        if char in WHITESPACE:
            pos += 1
            continue
        if char == "(":
            tokens.append(Token(TokenKind.LPAREN))
            pos += 1
            continue
        if char == ")":
            tokens.append(Token(TokenKind.RPAREN))
            pos += 1
            continue

        keyword = _keyword_at(text, pos)
        if keyword is not None:
            kind, pos = keyword
            tokens.append(Token(kind))
            continue

        if char == '"':
            start = pos + 1
            close = text.find('"', start)
            if close == -1:
                emit_term(text[start:])
                pos = size
            else:
                emit_term(text[start:close])
                pos = close + 1
            continue

        start = pos
        while pos < size and text[pos] not in _TERM_STOP:
            pos += 1
        emit_term(text[start:pos])

    tokens.append(Token(TokenKind.EOF))
    return tokens
