"""Grep command configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from SearchQuery.config.common import expect_bool, expect_str, get_optional_value, get_section


@dataclass(frozen=True, slots=True)
class GrepConfig:
    """File-tree grep settings.

    Attributes:
        root: Default directory to walk.
        skip_hidden: Whether dot-files and dot-directories are skipped.
    """

    root: str = "."
    skip_hidden: bool = True


def load_grep(raw: Mapping[str, Any]) -> GrepConfig:
    """Load the optional `grep` section."""
    section = get_section(raw, "grep", required=False)
    return GrepConfig(
        root=expect_str(get_optional_value(section, "root", "."), "grep.root"),
        skip_hidden=expect_bool(get_optional_value(section, "skip_hidden", True), "grep.skip_hidden"),
    )


def check_grep(config: GrepConfig) -> None:
    """Validate grep domain constraints."""
    if not config.root.strip():
        raise ValueError("grep.root must not be empty")
