"""Line-oriented query search over files and directory trees."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from SearchQuery.core.evaluate import evaluate
from SearchQuery.core.nodes import Node
from SearchQuery.core.parser import parse_query
from SearchQuery.core.rewrite import NO_REWRITE, TermRewrite
from SearchQuery.utils.log import log


@dataclass(frozen=True, slots=True)
class GrepMatch:
    """One matching line.

    Attributes:
        path: File the line was read from.
        line_number: 1-based line number.
        line: Line text without the trailing newline.
    """

    path: Path
    line_number: int
    line: str

    def render(self) -> str:
        """Render as `path:line:text`."""
        return f"{self.path}:{self.line_number}:{self.line}"


def _iter_matches(path: Path, node: Node | None) -> Iterator[GrepMatch]:
    with path.open("r", encoding="utf-8", errors="replace") as handle:
        for number, raw in enumerate(handle, start=1):
            line = raw.rstrip("\r\n")
            if node is None or evaluate(node, line):
                yield GrepMatch(path=path, line_number=number, line=line)


def grep_file(path: Path, query: str, rewrite: TermRewrite = NO_REWRITE) -> Iterator[GrepMatch]:
    """Yield lines of a text file matching a query.

    Raises:
        ParseError: If the query is malformed.
        OSError: If the file cannot be read.
    """
    node = parse_query(query, rewrite)
    yield from _iter_matches(path, node)


def _walk_files(root: Path, skip_hidden: bool) -> Iterator[Path]:
    def on_error(error: OSError) -> None:
        log.warning("Skipping unreadable path: %s", error)

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        if skip_hidden:
            dirnames[:] = [name for name in dirnames if not name.startswith(".")]
        dirnames.sort()
        for name in sorted(filenames):
            if skip_hidden and name.startswith("."):
                continue
            path = Path(dirpath) / name
            if path.is_file():
                yield path


def grep_tree(
    root: Path,
    query: str,
    rewrite: TermRewrite = NO_REWRITE,
    *,
    skip_hidden: bool = True,
) -> Iterator[GrepMatch]:
    """Yield matching lines from every regular file under `root`.

    The query is parsed before any file is opened, so a malformed query
    fails fast. Unreadable files are logged and skipped.

    Args:
        root: Directory (or single file) to search.
        query: User-typed query.
        rewrite: Term rewrite strategy.
        skip_hidden: Skip dot-files and dot-directories.

    Raises:
        ParseError: If the query is malformed.
    """
    node = parse_query(query, rewrite)
    files = [root] if root.is_file() else _walk_files(root, skip_hidden)
    for path in files:
        try:
            yield from _iter_matches(path, node)
        except OSError as error:
            log.warning("Cannot read file %s: %s", path, error)
