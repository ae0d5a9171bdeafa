"""Config validator.

Checks a DiscoveryConfig against protocol limits before a run starts.
"""

import ipaddress

from ..protocol.constants import HEADER_SIZE, REPLY_MIN_LENGTH
from .loader import ConfigError
from .schema import (
    DiscoveryConfig,
    ValidationError,
    ValidationResult,
    VALID_DUPLICATE_POLICIES,
)


def validate_config(config: DiscoveryConfig) -> ValidationResult:
    """Validate a DiscoveryConfig.

    Args:
        config: Config to validate.

    Returns:
        ValidationResult with errors and warnings.
    """
    errors: list[ValidationError] = []
    warnings: list[ValidationError] = []

    if not 0 <= config.port <= 65535:
        errors.append(ValidationError(
            path="discovery.port",
            message=f"Port must be between 0 and 65535, got {config.port}.",
        ))
    elif config.port == 0:
        warnings.append(ValidationError(
            path="discovery.port",
            message="Port 0 binds an ephemeral port; devices reply to 9999 and will not be heard.",
            severity="warning",
        ))

    if config.bind_address:
        try:
            ipaddress.IPv4Address(config.bind_address)
        except ValueError:
            errors.append(ValidationError(
                path="discovery.bind_address",
                message=f"Invalid IPv4 bind address '{config.bind_address}'.",
            ))

    if config.timeout <= 0:
        errors.append(ValidationError(
            path="discovery.timeout",
            message=f"Timeout must be positive, got {config.timeout}.",
        ))

    if config.recv_buffer_size < REPLY_MIN_LENGTH:
        errors.append(ValidationError(
            path="discovery.recv_buffer_size",
            message=f"Receive buffer must hold a full reply ({REPLY_MIN_LENGTH} bytes), got {config.recv_buffer_size}.",
        ))

    if config.query_size < HEADER_SIZE:
        errors.append(ValidationError(
            path="discovery.query_size",
            message=f"Query size must be at least {HEADER_SIZE} bytes, got {config.query_size}.",
        ))

    if config.duplicates not in VALID_DUPLICATE_POLICIES:
        errors.append(ValidationError(
            path="discovery.duplicates",
            message=f"Invalid duplicate policy '{config.duplicates}'. Must be one of: {', '.join(sorted(VALID_DUPLICATE_POLICIES))}",
        ))

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )


def ensure_valid(config: DiscoveryConfig) -> ValidationResult:
    """Validate a config, raising on errors.

    Returns:
        The ValidationResult, so callers can report its warnings.

    Raises:
        ConfigError: If the config has any errors.
    """
    validation = validate_config(config)
    if not validation.valid:
        errors_str = "; ".join(f"{e.path}: {e.message}" for e in validation.errors)
        raise ConfigError(f"{validation}: {errors_str}")
    return validation
