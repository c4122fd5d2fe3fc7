from __future__ import annotations

from enum import Enum


class ParseErrorKind(Enum):
    """Reason a token sequence could not be turned into a query tree."""

    MISMATCHED_PARENTHESES = "mismatched parentheses"
    INVALID_EXPRESSION = "invalid expression"


class ParseError(ValueError):
    """Raised when a query is malformed.

    Attributes:
        kind: Failure category.
    """

    def __init__(self, kind: ParseErrorKind, message: str | None = None) -> None:
        self.kind = kind
        super().__init__(message or kind.value)
