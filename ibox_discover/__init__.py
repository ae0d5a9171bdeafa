"""ibox-discover: find iBox (ASUS) devices on the local network."""

from .config import DiscoveryConfig, DuplicatePolicy
from .discovery import (
    DiscoveryIssue,
    DiscoveryResult,
    DiscoverySession,
    IssueKind,
    discover,
    list_broadcast_targets,
)
from .protocol import DeviceInfo, decode_reply, encode_query

__version__ = "0.1.0"

__all__ = [
    "DeviceInfo",
    "DiscoveryConfig",
    "DiscoveryIssue",
    "DiscoveryResult",
    "DiscoverySession",
    "DuplicatePolicy",
    "IssueKind",
    "decode_reply",
    "discover",
    "encode_query",
    "list_broadcast_targets",
]
