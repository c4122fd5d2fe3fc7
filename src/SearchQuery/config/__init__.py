"""Public configuration API for SearchQuery."""

from __future__ import annotations

from SearchQuery.config.app import (
    DEFAULT_CONFIG,
    DEFAULT_CONFIG_PATH,
    AppConfig,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from SearchQuery.config.grep import GrepConfig
from SearchQuery.config.log import LogConfig
from SearchQuery.config.rewrite import RewriteConfig
from SearchQuery.config.storage import StorageConfig

__all__ = [
    "LogConfig",
    "RewriteConfig",
    "StorageConfig",
    "GrepConfig",
    "AppConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_CONFIG_PATH",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
]
