"""Term rewrite configuration (stopwords and synonyms)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from SearchQuery.config.common import (
    expect_str_list,
    expect_str_mapping,
    get_optional_value,
    get_section,
)


@dataclass(frozen=True, slots=True)
class RewriteConfig:
    """Rewrite rules applied to every query term.

    Attributes:
        stopwords: Terms dropped from queries (case-insensitive).
        synonyms: Term to replacement mapping (case-insensitive keys).
    """

    stopwords: tuple[str, ...] = ()
    synonyms: Mapping[str, str] = field(default_factory=dict)


def load_rewrite(raw: Mapping[str, Any]) -> RewriteConfig:
    """Load the optional `rewrite` section."""
    section = get_section(raw, "rewrite", required=False)
    stopwords = expect_str_list(get_optional_value(section, "stopwords", []) or [], "rewrite.stopwords")
    synonyms = expect_str_mapping(get_optional_value(section, "synonyms", {}) or {}, "rewrite.synonyms")
    return RewriteConfig(
        stopwords=tuple(word.strip() for word in stopwords if word.strip()),
        synonyms={key.strip(): value.strip() for key, value in synonyms.items()},
    )


def check_rewrite(config: RewriteConfig) -> None:
    """Validate rewrite domain constraints."""
    for key, value in config.synonyms.items():
        if not key:
            raise ValueError("rewrite.synonyms keys must not be empty")
        if not value:
            raise ValueError(f"rewrite.synonyms.{key} must not be empty")
