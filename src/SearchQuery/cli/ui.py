"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to the runner.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from SearchQuery.cli.commands import (
    CompileCommand,
    GrepCommand,
    IndexCommand,
    ListCommand,
    MatchCommand,
    SearchCommand,
)
from SearchQuery.cli.runner import CommandRunner
from SearchQuery.config import DEFAULT_CONFIG_PATH, load_config_with_defaults
from SearchQuery.dialects import supported_dialects


@click.group(help="SearchQuery: boolean full-text queries for text, PostgreSQL and SQLite.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, exists=True, dir_okay=False),
    default=None,
    help=f"YAML config file merged over {DEFAULT_CONFIG_PATH} (when present) and the built-in defaults.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.

    Args:
        ctx: Click context.
        config_path: Optional YAML override file.
    """
    load_dotenv()
    ctx.obj = CommandRunner(load_config_with_defaults(config_path, DEFAULT_CONFIG_PATH))


@cli.command("match")
@click.argument("query")
@click.argument("content")
@click.pass_context
def match_cmd(ctx: click.Context, query: str, content: str) -> None:
    """Print whether CONTENT matches QUERY."""
    runner: CommandRunner = ctx.obj
    runner.run(ctx.command.name, lambda rewrite: MatchCommand(query, content, rewrite))


@cli.command("compile")
@click.argument("query")
@click.option(
    "--dialect",
    type=click.Choice(supported_dialects(), case_sensitive=False),
    default="postgres",
    show_default=True,
    help="Backend query syntax.",
)
@click.pass_context
def compile_cmd(ctx: click.Context, query: str, dialect: str) -> None:
    """Print QUERY translated for a full-text backend."""
    runner: CommandRunner = ctx.obj
    runner.run(ctx.command.name, lambda rewrite: CompileCommand(query, dialect, rewrite))


@cli.command("grep")
@click.argument("query")
@click.argument("root", required=False, type=click.Path(path_type=Path, exists=True))
@click.pass_context
def grep_cmd(ctx: click.Context, query: str, root: Path | None) -> None:
    """Print lines matching QUERY in every file under ROOT."""
    runner: CommandRunner = ctx.obj
    grep_config = runner.config.grep
    target = root if root is not None else Path(grep_config.root)
    runner.run(
        ctx.command.name,
        lambda rewrite: GrepCommand(query, target, grep_config.skip_hidden, rewrite),
    )


@cli.command("index")
@click.argument("texts", nargs=-1, required=True)
@click.pass_context
def index_cmd(ctx: click.Context, texts: tuple[str, ...]) -> None:
    """Replace the stored documents with TEXTS."""
    runner: CommandRunner = ctx.obj
    runner.run_with_store(ctx.command.name, lambda store, rewrite: IndexCommand(store, texts))


@cli.command("list")
@click.pass_context
def list_cmd(ctx: click.Context) -> None:
    """Print every stored document."""
    runner: CommandRunner = ctx.obj
    runner.run_with_store(ctx.command.name, lambda store, rewrite: ListCommand(store))


@cli.command("search")
@click.argument("query")
@click.pass_context
def search_cmd(ctx: click.Context, query: str) -> None:
    """Print stored documents matching QUERY."""
    runner: CommandRunner = ctx.obj
    runner.run_with_store(ctx.command.name, lambda store, rewrite: SearchCommand(store, query, rewrite))
