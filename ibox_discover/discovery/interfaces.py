"""Broadcast target enumeration.

Lists the IPv4 broadcast address of every non-loopback interface binding on
this host, using psutil for cross-platform interface introspection.
"""

import ipaddress
import logging
import socket
from dataclasses import dataclass, field

import psutil

from .errors import DiscoveryIssue, InterfaceEnumerationError, IssueKind

logger = logging.getLogger(__name__)


@dataclass
class EnumerationResult:
    """Broadcast targets plus any interfaces that had to be skipped."""
    targets: list[str] = field(default_factory=list)
    issues: list[DiscoveryIssue] = field(default_factory=list)


def _is_loopback(addresses: list, stats) -> bool:
    """Check the interface flags, falling back to its addresses.

    Raises:
        ValueError: If an IPv4 address on the interface can't be parsed.
    """
    flags = getattr(stats, "flags", "") if stats is not None else ""
    if flags:
        return "loopback" in flags.split(",")

    # No flags on this platform (Windows); look at the addresses instead
    for address in addresses:
        if address.family == socket.AF_INET and ipaddress.IPv4Address(address.address).is_loopback:
            return True
    return False


def _interface_broadcasts(addresses: list) -> list[str]:
    """Collect the broadcast address of every IPv4 binding."""
    broadcasts = []
    for address in addresses:
        if address.family != socket.AF_INET:
            continue
        if not address.broadcast:
            continue
        broadcasts.append(str(ipaddress.IPv4Address(address.broadcast)))
    return broadcasts


def enumerate_broadcast_targets() -> EnumerationResult:
    """Enumerate broadcast targets with per-interface issue reporting.

    Returns:
        EnumerationResult with deduplicated targets in interface order.

    Raises:
        InterfaceEnumerationError: If the OS interface list is unavailable.
    """
    try:
        interfaces = psutil.net_if_addrs()
    except (OSError, psutil.Error) as e:
        logger.error(f"Unable to retrieve list of network interfaces: {e}")
        raise InterfaceEnumerationError(f"Unable to retrieve list of network interfaces: {e}") from e

    # Without flags, loopback is judged by address
    try:
        stats = psutil.net_if_stats()
    except (OSError, psutil.Error) as e:
        logger.warning(f"Unable to read interface flags, judging loopback by address: {e}")
        stats = {}

    result = EnumerationResult()
    for name, addresses in interfaces.items():
        try:
            if _is_loopback(addresses, stats.get(name)):
                logger.debug(f"Skipping loopback interface {name}")
                continue
            broadcasts = _interface_broadcasts(addresses)
        except ValueError as e:
            logger.warning(f"Unable to inspect interface {name}: {e}")
            result.issues.append(DiscoveryIssue(
                kind=IssueKind.INTERFACE,
                message=f"Unable to inspect interface {name}: {e}",
                target=name,
            ))
            continue

        for broadcast in broadcasts:
            if broadcast not in result.targets:
                logger.debug(f"Broadcast target {broadcast} via {name}")
                result.targets.append(broadcast)

    return result


def list_broadcast_targets() -> list[str]:
    """Return the broadcast addresses of all non-loopback interfaces.

    Raises:
        InterfaceEnumerationError: If the OS interface list is unavailable.
    """
    return enumerate_broadcast_targets().targets
