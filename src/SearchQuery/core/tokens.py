from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Lexical token kinds produced by the tokenizer."""

    TERM = "TERM"
    AND = "AND"
    OR = "OR"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    EOF = "EOF"


@dataclass(frozen=True, slots=True)
class Token:
    """One lexical token.

    Attributes:
        kind: Token kind.
        value: Term or phrase text for `TERM` tokens (after rewrite), empty
            for every other kind.
    """

    kind: TokenKind
    value: str = ""
