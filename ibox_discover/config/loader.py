"""YAML config loader.

Reads an optional discovery config file into a DiscoveryConfig:

    discovery:
      timeout: 5
      port: 9999
      duplicates: hardware-address
"""

import dataclasses
from pathlib import Path
from typing import Union

import yaml

from .schema import DiscoveryConfig

# Expected Python types per config key; ints are accepted for floats
_FIELD_TYPES = {
    "port": (int,),
    "bind_address": (str,),
    "timeout": (int, float),
    "recv_buffer_size": (int,),
    "query_size": (int,),
    "duplicates": (str,),
}


class ConfigError(ValueError):
    """Config file is missing or malformed."""


def load_config(file_path: Union[str, Path]) -> DiscoveryConfig:
    """Load a YAML config file.

    Args:
        file_path: Path to the YAML config file.

    Returns:
        Parsed DiscoveryConfig. Keys absent from the file keep their defaults.

    Raises:
        ConfigError: If the file doesn't exist or is malformed.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise ConfigError(f"Config file not found: {file_path}")

    if file_path.suffix not in (".yaml", ".yml"):
        raise ConfigError(f"Expected .yaml or .yml file, got: {file_path.suffix}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {file_path}: {e}") from e

    if data is None:
        return DiscoveryConfig()

    return parse_config_data(data, source=str(file_path))


def parse_config_data(data: dict, source: str = "<inline>") -> DiscoveryConfig:
    """Parse a config from an already loaded mapping."""
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a YAML mapping, got {type(data).__name__}")

    section = data.get("discovery", {})
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise ConfigError(f"'discovery' must be a mapping in {source}")

    values = {}
    for name, value in section.items():
        if name not in _FIELD_TYPES:
            continue
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, _FIELD_TYPES[name]):
            raise ConfigError(
                f"'discovery.{name}' has wrong type {type(value).__name__} in {source}"
            )
        values[name] = value

    return DiscoveryConfig(**values)


def merge_overrides(config: DiscoveryConfig, **overrides) -> DiscoveryConfig:
    """Return a copy of config with every non-None override applied."""
    changes = {k: v for k, v in overrides.items() if v is not None}
    return dataclasses.replace(config, **changes)
