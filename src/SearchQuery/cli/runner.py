"""Command runner for coordinating CLI execution.

Manages logging configuration, rewrite and storage construction, resource
cleanup, and error handling for command execution.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

import click

from SearchQuery.config import AppConfig
from SearchQuery.core.errors import ParseError
from SearchQuery.core.rewrite import TermRewrite, build_rewrite
from SearchQuery.storage import DocumentStore, create_storage
from SearchQuery.utils.log import configure_logging, log


class Command(Protocol):
    def execute(self, emit: Callable[[str], None]) -> None: ...


class CommandRunner:
    """Orchestrates command execution with proper resource management."""

    def __init__(self, config: AppConfig, emit: Callable[[str], None] = click.echo) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
            emit: Output sink for command results.
        """
        self.config = config
        self.emit = emit

    def _configure(self, action: str) -> TermRewrite:
        log_path = configure_logging(self.config.log, action)
        if log_path is not None:
            log.debug("Logging %s to %s", action, log_path)
        return build_rewrite(self.config.rewrite)

    def run(self, action: str, build: Callable[[TermRewrite], Command]) -> None:
        """Execute a command that needs no storage.

        Args:
            action: The CLI command name (e.g., 'grep').
            build: Creates the command from the configured rewrite.

        Raises:
            click.Abort: When the query is malformed or the command fails.
        """
        rewrite = self._configure(action)
        self._execute(action, lambda: build(rewrite).execute(self.emit))

    def run_with_store(self, action: str, build: Callable[[DocumentStore, TermRewrite], Command]) -> None:
        """Execute a command against the configured document store.

        The database connection is closed when the command finishes.

        Raises:
            click.Abort: When the query is malformed or the command fails.
        """
        rewrite = self._configure(action)

        def body() -> None:
            db_manager, store = create_storage(self.config)
            with db_manager:
                build(store, rewrite).execute(self.emit)

        self._execute(action, body)

    def _execute(self, action: str, body: Callable[[], None]) -> None:
        try:
            body()
        except ParseError as e:
            log.error("Invalid query: %s", e)
            raise click.Abort from e
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("%s failed: %s", action.capitalize(), e)
            raise click.Abort from e
