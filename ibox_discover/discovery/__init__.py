"""Discovery module - UDP broadcast discovery of iBox devices."""

from .errors import (
    DiscoveryError,
    DiscoveryIssue,
    DiscoveryResult,
    InterfaceEnumerationError,
    IssueKind,
)
from .interfaces import EnumerationResult, enumerate_broadcast_targets, list_broadcast_targets
from .session import DiscoverySession, apply_duplicate_policy, discover
from .timeout_handler import Deadline

__all__ = [
    "Deadline",
    "DiscoveryError",
    "DiscoveryIssue",
    "DiscoveryResult",
    "DiscoverySession",
    "EnumerationResult",
    "InterfaceEnumerationError",
    "IssueKind",
    "apply_duplicate_policy",
    "discover",
    "enumerate_broadcast_targets",
    "list_broadcast_targets",
]
