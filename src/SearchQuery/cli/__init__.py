"""Console entry point for the `searchquery` command."""

from __future__ import annotations

from SearchQuery.cli.ui import cli

__all__ = ["cli", "main"]


def main() -> None:
    """Run the `searchquery` console script."""
    cli(prog_name="searchquery")
