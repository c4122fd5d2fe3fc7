"""Query-driven services built on the core pipeline."""

from __future__ import annotations

from SearchQuery.services.grep import GrepMatch, grep_file, grep_tree

__all__ = [
    "GrepMatch",
    "grep_file",
    "grep_tree",
]
