"""Helpers shared by the backend query compilers."""

from __future__ import annotations

import re

_RE_WHITESPACE = re.compile(r"[ \t\n\r\f\v]+")


def strip_outer_quotes(text: str) -> str:
    """Remove one layer of surrounding double quotes, if present."""
    if text and text[0] == '"' and text[-1] == '"':
        return text[1:-1]
    return text


def is_phrase(text: str) -> bool:
    """Return True if a term holds several words (contains a space)."""
    return " " in text


def split_words(text: str) -> list[str]:
    """Split a phrase on whitespace, dropping empty pieces."""
    return [word for word in _RE_WHITESPACE.split(text) if word]
