"""Typed outcomes of a discovery run.

Every failure a run can hit is recorded as a DiscoveryIssue on the
DiscoveryResult, so callers can tell a fatal abort from a skipped target
without reading log output.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..protocol.schema import DeviceInfo


class IssueKind(str, Enum):
    """Category of a discovery failure."""
    SETUP = "setup"          # socket or interface enumeration failed; run aborted
    INTERFACE = "interface"  # one interface skipped
    SEND = "send"            # one target skipped
    RECEIVE = "receive"      # one receive call failed


class DiscoveryError(Exception):
    """Base class for discovery failures."""


class InterfaceEnumerationError(DiscoveryError):
    """The host's network interfaces could not be listed at all."""


@dataclass
class DiscoveryIssue:
    """A single failure recorded during a run."""
    kind: IssueKind
    message: str
    target: Optional[str] = None

    @property
    def fatal(self) -> bool:
        return self.kind == IssueKind.SETUP

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "target": self.target,
        }


@dataclass
class DiscoveryResult:
    """Everything a discovery run produced."""
    devices: list[DeviceInfo] = field(default_factory=list)
    targets: list[str] = field(default_factory=list)
    issues: list[DiscoveryIssue] = field(default_factory=list)
    discarded: int = 0
    duration_ms: int = 0

    @property
    def fatal_issue(self) -> Optional[DiscoveryIssue]:
        for issue in self.issues:
            if issue.fatal:
                return issue
        return None

    @property
    def aborted(self) -> bool:
        """Whether the run stopped before sending any query."""
        return self.fatal_issue is not None

    @property
    def device_count(self) -> int:
        return len(self.devices)

    def issues_of(self, kind: IssueKind) -> list[DiscoveryIssue]:
        return [i for i in self.issues if i.kind == kind]

    def __str__(self) -> str:
        if self.aborted:
            return f"Aborted: {self.fatal_issue.message}"
        return (
            f"{self.device_count} device(s) from {len(self.targets)} target(s), "
            f"{len(self.issues)} issue(s), {self.discarded} discarded"
        )
