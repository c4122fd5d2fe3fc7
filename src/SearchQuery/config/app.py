"""Application config orchestration and YAML loading entrypoints.

Layering, lowest first:
1. `DEFAULT_CONFIG`, the built-in values.
2. The default file (`config/default.yml`), when it exists.
3. An explicit `--config` file.

Each layer is deep-merged over the one below it.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from SearchQuery.config.grep import GrepConfig, check_grep, load_grep
from SearchQuery.config.log import LogConfig, check_log, load_log
from SearchQuery.config.rewrite import RewriteConfig, check_rewrite, load_rewrite
from SearchQuery.config.storage import StorageConfig, check_storage, load_storage

DEFAULT_CONFIG_PATH = Path("config/default.yml")

DEFAULT_CONFIG: Mapping[str, Any] = {
    "log": {"level": "INFO", "to_file": False, "dir": "log", "trace_queries": False},
    "rewrite": {"stopwords": [], "synonyms": {}},
    "storage": {"db_path": "database/searchquery.sqlite3", "table": "example"},
    "grep": {"root": ".", "skip_hidden": True},
}


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    log: LogConfig
    rewrite: RewriteConfig
    storage: StorageConfig
    grep: GrepConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    log_config = load_log(raw)
    rewrite = load_rewrite(raw)
    storage = load_storage(raw)
    grep = load_grep(raw)

    check_log(log_config)
    check_rewrite(rewrite)
    check_storage(storage)
    check_grep(grep)

    return AppConfig(
        log=log_config,
        rewrite=rewrite,
        storage=storage,
        grep=grep,
    )


def load_config_with_defaults(
    config_path: Path | None = None, default_path: Path = DEFAULT_CONFIG_PATH
) -> AppConfig:
    """Load config from the built-in values, the default file and an override.

    Args:
        config_path: Explicit config file; None uses the lower layers only.
        default_path: Default config file, skipped when it does not exist.

    Raises:
        OSError: If `config_path` cannot be read.
        TypeError: If a config value has the wrong type.
        ValueError: If the YAML root is not a mapping or a value is invalid.
    """
    merged: dict[str, Any] = dict(DEFAULT_CONFIG)
    if default_path.is_file():
        merged = merge_config_dicts(merged, parse_yaml(default_path.read_text(encoding="utf-8")))
    if config_path is not None and config_path.resolve() != default_path.resolve():
        merged = merge_config_dicts(merged, parse_yaml(config_path.read_text(encoding="utf-8")))
    return parse_config_dict(merged)


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
