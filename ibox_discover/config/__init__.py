"""Config module - discovery settings and YAML loading."""

from .schema import (
    DEFAULT_TIMEOUT,
    DiscoveryConfig,
    DuplicatePolicy,
    ValidationError,
    ValidationResult,
)
from .loader import ConfigError, load_config, merge_overrides, parse_config_data
from .validator import ensure_valid, validate_config

__all__ = [
    "DEFAULT_TIMEOUT",
    "DiscoveryConfig",
    "DuplicatePolicy",
    "ValidationError",
    "ValidationResult",
    "ConfigError",
    "load_config",
    "merge_overrides",
    "parse_config_data",
    "ensure_valid",
    "validate_config",
]
