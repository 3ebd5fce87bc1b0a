"""Configuration loader with merge logic and precedence handling."""

import copy
import os
from pathlib import Path
from typing import Any, Optional

import yaml

from mkcd.config.defaults import DEFAULT_CONFIG
from mkcd.config.schema import MkcdConfig
from mkcd.exceptions import HomeDirUnavailable
from mkcd.utils.paths import expand_path

USER_CONFIG_PATH = "~/.config/mkcd/config.yaml"

TRUTHY = {"1", "true", "yes", "on"}


def find_config_files() -> list[Path]:
    """Find configuration files in standard locations.

    Only the user config (~/.config/mkcd/config.yaml) is searched. It is
    skipped when the home directory cannot be determined, so that mkcd can
    still report the real error for the directory argument.

    Returns:
        List of Path objects for existing config files, ordered from lowest
        to highest precedence
    """
    config_files = []

    try:
        user_config = expand_path(USER_CONFIG_PATH)
    except HomeDirUnavailable:
        return config_files

    if user_config.is_file():
        config_files.append(user_config)

    return config_files


def load_yaml_file(file_path: Path) -> dict[str, Any]:
    """Load and parse a YAML configuration file.

    Args:
        file_path: Path to the YAML file

    Returns:
        Dictionary containing the parsed YAML content

    Raises:
        yaml.YAMLError: If the file contains invalid YAML
        FileNotFoundError: If the file doesn't exist
    """
    with open(file_path, "r") as f:
        content = yaml.safe_load(f)
        return content if content is not None else {}


def merge_configs(configs: list[dict[str, Any]]) -> dict[str, Any]:
    """Deep merge multiple configuration dictionaries.

    Later configs override earlier ones. Nested dictionaries are merged
    recursively; any other value, lists included, is replaced outright.

    Args:
        configs: List of configuration dictionaries in order from lowest to
                highest precedence

    Returns:
        Merged configuration dictionary
    """
    result: dict[str, Any] = {}

    for config in configs:
        result = _deep_merge(result, config)

    return result


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in TRUTHY


def apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply environment variable overrides to configuration.

    Supports the following environment variables:
    - MKCD_VERBOSE: Override settings.verbose (1/true/yes/on)
    - MKCD_COLOR: Override settings.color (1/true/yes/on)
    - NO_COLOR: Any non-empty value disables color, winning over MKCD_COLOR

    Args:
        config: Configuration dictionary to apply overrides to

    Returns:
        Configuration dictionary with environment overrides applied
    """
    result = copy.deepcopy(config)
    settings = result.setdefault("settings", {})

    if verbose := os.getenv("MKCD_VERBOSE"):
        settings["verbose"] = _parse_bool(verbose)

    if color := os.getenv("MKCD_COLOR"):
        settings["color"] = _parse_bool(color)

    if os.getenv("NO_COLOR"):
        settings["color"] = False

    return result


def load_config(config_path: Optional[Path] = None) -> MkcdConfig:
    """Load and merge configuration from all sources.

    Configuration precedence (lowest to highest):
    1. Built-in defaults
    2. User config (~/.config/mkcd/config.yaml)
    3. Explicitly provided config_path (if given)
    4. Environment variables
    5. CLI flags (handled by caller)

    Args:
        config_path: Optional explicit path to a config file

    Returns:
        Validated MkcdConfig instance

    Raises:
        pydantic.ValidationError: If the merged configuration is invalid
        yaml.YAMLError: If a config file contains invalid YAML
        FileNotFoundError: If config_path is provided but doesn't exist
    """
    configs_to_merge = [copy.deepcopy(DEFAULT_CONFIG)]

    for config_file in find_config_files():
        configs_to_merge.append(load_yaml_file(config_file))

    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        configs_to_merge.append(load_yaml_file(config_path))

    merged_config = apply_env_overrides(merge_configs(configs_to_merge))

    return MkcdConfig(**merged_config)
