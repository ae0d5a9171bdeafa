"""Configuration models for a discovery run."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..protocol.constants import DEFAULT_RECV_BUFFER, HEADER_SIZE, IBOX_SRV_PORT


class DuplicatePolicy(str, Enum):
    """What to do with several replies from the same device."""
    KEEP = "keep"
    HARDWARE_ADDRESS = "hardware-address"


VALID_DUPLICATE_POLICIES = {e.value for e in DuplicatePolicy}

# Default listen window in seconds
DEFAULT_TIMEOUT = 5.0


@dataclass
class DiscoveryConfig:
    """Settings for one discovery run."""
    port: int = IBOX_SRV_PORT
    bind_address: str = ""
    timeout: float = DEFAULT_TIMEOUT
    recv_buffer_size: int = DEFAULT_RECV_BUFFER
    query_size: int = HEADER_SIZE
    duplicates: str = DuplicatePolicy.KEEP.value

    def __post_init__(self):
        self.duplicates = str(self.duplicates).lower()

    @property
    def duplicate_policy(self) -> DuplicatePolicy:
        return DuplicatePolicy(self.duplicates)

    def to_dict(self) -> dict[str, Any]:
        return {
            "port": self.port,
            "bind_address": self.bind_address,
            "timeout": self.timeout,
            "recv_buffer_size": self.recv_buffer_size,
            "query_size": self.query_size,
            "duplicates": self.duplicates,
        }


@dataclass
class ValidationError:
    """A single validation error."""
    path: str
    message: str
    severity: str = "error"  # "error" or "warning"


@dataclass
class ValidationResult:
    """Result of config validation."""
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationError] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def __str__(self) -> str:
        if self.valid:
            msg = "Valid"
            if self.warnings:
                msg += f" ({self.warning_count} warnings)"
            return msg
        return f"Invalid: {self.error_count} errors, {self.warning_count} warnings"
