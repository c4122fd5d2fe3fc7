"""Loggers for SearchQuery.

`log` is the application logger used by the CLI, storage and grep layers.
`query_log` is its child for per-query DEBUG records (parse results, dropped
compilations); it stays quiet unless `log.trace_queries` is enabled.

Console records go to stderr so command results on stdout stay
machine-readable. Record format: `mm-dd HH:MM:SS [LVL] message` with LVL one
of DEBG/INFO/WARN/ERRO.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from SearchQuery.config.log import LogConfig

log = logging.getLogger("SearchQuery")
query_log = log.getChild("query")

_SHORT_LEVELS: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "ERRO",
}


class _ShortLevelFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__(fmt="%(asctime)s [%(shortlevel)s] %(message)s", datefmt="%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - record is stdlib name
        record.shortlevel = _SHORT_LEVELS.get(record.levelno, record.levelname[:4])
        return super().format(record)


def log_file_path(log_dir: str, action: str) -> Path:
    """Return a fresh `<log_dir>/<action>/<action>_<mmddHHMMSS>.log` path."""
    stamp = datetime.now().strftime("%m%d%H%M%S")
    return Path(log_dir) / action / f"{action}_{stamp}.log"


def configure_logging(config: LogConfig, action: str | None = None) -> Path | None:
    """Install handlers for one CLI action, replacing earlier ones.

    Args:
        config: The `log` config section.
        action: CLI command name; names the log file directory.

    Returns:
        Path of the log file, or None when file logging is off.
    """
    formatter = _ShortLevelFormatter()
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(getattr(logging, config.level))
    console.setFormatter(formatter)
    log.addHandler(console)

    log_path = None
    if config.to_file and action:
        log_path = log_file_path(config.dir, action)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        mirror = logging.FileHandler(log_path, encoding="utf-8")
        mirror.setLevel(logging.DEBUG)
        mirror.setFormatter(formatter)
        log.addHandler(mirror)

    log.setLevel(logging.DEBUG)
    log.propagate = False
    query_log.setLevel(logging.DEBUG if config.trace_queries else logging.INFO)
    return log_path
