"""Configuration loading and management."""

from mkcd.config.loader import (
    find_config_files,
    load_config,
    merge_configs,
)
from mkcd.config.schema import MkcdConfig, SettingsConfig

__all__ = [
    # Loader functions
    "find_config_files",
    "load_config",
    "merge_configs",
    # Schema classes
    "MkcdConfig",
    "SettingsConfig",
]
