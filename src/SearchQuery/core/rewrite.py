"""Term rewrite strategies.

A rewrite is applied to every raw term or quoted phrase while the query is
lexed. Returning an empty string drops the token, which is how stopword
filtering works; returning different text substitutes it, which is how
synonym mapping works.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from SearchQuery.config.rewrite import RewriteConfig

TermRewrite = Callable[[str], str]


def NO_REWRITE(term: str) -> str:  # noqa: N802 - used as a constant strategy
    """Identity rewrite: keep every term unchanged."""
    return term


def stopword_rewrite(stopwords: Iterable[str]) -> TermRewrite:
    """Build a rewrite that drops stopwords.

    Args:
        stopwords: Words to drop, compared case-insensitively.

    Returns:
        Rewrite returning an empty string for stopwords.
    """
    dropped = frozenset(word.strip().casefold() for word in stopwords if word.strip())

    def rewrite(term: str) -> str:
        if term.strip().casefold() in dropped:
            return ""
        return term

    return rewrite


def synonym_rewrite(synonyms: Mapping[str, str]) -> TermRewrite:
    """Build a rewrite that maps terms to a canonical form.

    Args:
        synonyms: Mapping of term to replacement, keys compared
            case-insensitively.

    Returns:
        Rewrite substituting mapped terms and passing others through.
    """
    table = {key.strip().casefold(): value for key, value in synonyms.items() if key.strip()}

    def rewrite(term: str) -> str:
        return table.get(term.strip().casefold(), term)

    return rewrite


def chain_rewrites(*rewrites: TermRewrite) -> TermRewrite:
    """Compose rewrites left to right, stopping once a term is dropped."""
    if not rewrites:
        return NO_REWRITE
    if len(rewrites) == 1:
        return rewrites[0]

    def rewrite(term: str) -> str:
        for step in rewrites:
            term = step(term)
            if not term:
                return ""
        return term

    return rewrite


def build_rewrite(config: RewriteConfig) -> TermRewrite:
    """Build the rewrite chain described by the `rewrite` config section.

    Synonyms are applied before stopwords, so a synonym that maps onto a
    stopword is dropped as well.
    """
    steps: list[TermRewrite] = []
    if config.synonyms:
        steps.append(synonym_rewrite(config.synonyms))
    if config.stopwords:
        steps.append(stopword_rewrite(config.stopwords))
    return chain_rewrites(*steps)
