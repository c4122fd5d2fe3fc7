"""`log` section: console threshold, file mirror and query tracing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from SearchQuery.config.common import (
    expect_bool,
    expect_str,
    get_optional_value,
    get_required_value,
    get_section,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class LogConfig:
    """Logging settings for one CLI invocation.

    Attributes:
        level: Threshold for records written to stderr.
        to_file: Mirror every record (DEBUG and up) to `<dir>/<action>/`.
        dir: Base directory for log files.
        trace_queries: Let per-query DEBUG records from the parser, the
            evaluator and the dialect compilers through to the handlers.
    """

    level: str = "INFO"
    to_file: bool = False
    dir: str = "log"
    trace_queries: bool = False


def load_log(raw: Mapping[str, Any]) -> LogConfig:
    """Load the required `log` section.

    Raises:
        TypeError: If a value has the wrong type.
        ValueError: If a required key is missing.
    """
    section = get_section(raw, "log", required=True)
    return LogConfig(
        level=expect_str(get_required_value(section, "level", "log.level"), "log.level").strip().upper(),
        to_file=expect_bool(get_required_value(section, "to_file", "log.to_file"), "log.to_file"),
        dir=expect_str(get_required_value(section, "dir", "log.dir"), "log.dir"),
        trace_queries=expect_bool(
            get_optional_value(section, "trace_queries", False), "log.trace_queries"
        ),
    )


def check_log(config: LogConfig) -> None:
    """Validate `log` constraints."""
    if config.level not in LOG_LEVELS:
        raise ValueError(f"log.level must be one of {', '.join(LOG_LEVELS)}")
    if config.to_file and not config.dir.strip():
        raise ValueError("log.dir must not be empty when log.to_file is enabled")
