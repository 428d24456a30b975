"""YAML configuration loading for the product search command line tools."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


class ConfigError(Exception):
    """Raised when a configuration file is missing, unparsable or mis-shaped."""


def load_yaml_config(path: Optional[Union[str, Path]]) -> Dict[str, Any]:
    """Read the YAML mapping at ``path``; no path means built-in defaults."""
    if not path:
        return {}

    config_path = Path(path).expanduser()
    if not config_path.is_file():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration root in {config_path} must be a mapping.")
    return data


def get_section(config: Dict[str, Any], section: str) -> Dict[str, Any]:
    """Return ``config[section]``; an absent or null section is empty."""
    value = config.get(section)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"Section '{section}' must be a mapping.")
    return value
