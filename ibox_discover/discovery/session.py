"""iBox discovery session.

Broadcasts one GETINFO query to every local broadcast address from a socket
bound to the iBox port, then collects replies on that same socket until the
listen window closes.
"""

import errno
import logging
import socket
import time
from typing import Callable, Optional

from ..config.schema import DiscoveryConfig, DuplicatePolicy
from ..config.validator import ensure_valid
from ..protocol.codec import decode_reply, encode_query
from ..protocol.schema import DeviceInfo
from .errors import (
    DiscoveryIssue,
    DiscoveryResult,
    InterfaceEnumerationError,
    IssueKind,
)
from .interfaces import EnumerationResult, enumerate_broadcast_targets
from .timeout_handler import Deadline

logger = logging.getLogger(__name__)

# Receive errors after which the socket cannot be read again
_UNUSABLE_SOCKET_ERRNOS = (errno.EBADF, errno.ENOTSOCK)


def _create_udp_socket() -> socket.socket:
    return socket.socket(socket.AF_INET, socket.SOCK_DGRAM)


def apply_duplicate_policy(devices: list[DeviceInfo], policy: DuplicatePolicy) -> list[DeviceInfo]:
    """Filter repeated replies according to policy, keeping arrival order."""
    if policy == DuplicatePolicy.KEEP:
        return list(devices)

    seen: set[bytes] = set()
    unique = []
    for device in devices:
        if device.hardware_address in seen:
            continue
        seen.add(device.hardware_address)
        unique.append(device)
    return unique


class DiscoverySession:
    """One broadcast-and-listen run.

    The session owns exactly one UDP socket for its lifetime. Queries go out
    to every target before the first reply is read.
    """

    def __init__(
        self,
        config: Optional[DiscoveryConfig] = None,
        socket_factory: Optional[Callable[[], socket.socket]] = None,
        target_provider: Optional[Callable[[], EnumerationResult]] = None,
    ):
        """Initialize discovery session.

        Args:
            config: Run settings. Default: DiscoveryConfig().
            socket_factory: Returns an unbound UDP socket.
            target_provider: Returns the broadcast targets to query.

        Raises:
            ConfigError: If the config is invalid. Nothing is opened or sent.
        """
        self.config = config or DiscoveryConfig()
        ensure_valid(self.config)
        self._socket_factory = socket_factory or _create_udp_socket
        self._target_provider = target_provider or enumerate_broadcast_targets
        self._sock: Optional[socket.socket] = None

    def _open_socket(self) -> socket.socket:
        """Create the socket, allow address reuse and broadcast, and bind it."""
        sock = self._socket_factory()
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            sock.bind((self.config.bind_address, self.config.port))
        except OSError:
            sock.close()
            raise
        return sock

    def run(self, timeout: Optional[float] = None) -> DiscoveryResult:
        """Broadcast the query and collect replies.

        Args:
            timeout: Listen window in seconds. Default: config.timeout.

        Returns:
            DiscoveryResult. If the socket or the interface list can't be
            set up, the result carries a fatal SETUP issue and no devices.
        """
        timeout = self.config.timeout if timeout is None else timeout
        start_time = time.monotonic()
        result = DiscoveryResult()

        try:
            try:
                self._sock = self._open_socket()
            except OSError as e:
                logger.error(f"Unable to create a datagram socket on port {self.config.port}: {e}")
                result.issues.append(DiscoveryIssue(
                    kind=IssueKind.SETUP,
                    message=f"Unable to create a datagram socket on port {self.config.port}: {e}",
                ))
                return result

            try:
                enumeration = self._target_provider()
            except InterfaceEnumerationError as e:
                result.issues.append(DiscoveryIssue(kind=IssueKind.SETUP, message=str(e)))
                return result

            result.targets = list(enumeration.targets)
            result.issues.extend(enumeration.issues)

            self._send_queries(result)
            self._receive_replies(Deadline(timeout), result)

        finally:
            self.close()
            result.duration_ms = int((time.monotonic() - start_time) * 1000)

        result.devices = apply_duplicate_policy(result.devices, self.config.duplicate_policy)
        return result

    def _send_queries(self, result: DiscoveryResult) -> None:
        """Send one query to every target; failures skip only that target."""
        query = encode_query(size=self.config.query_size)

        for target in result.targets:
            try:
                self._sock.sendto(query, (target, self.config.port))
                logger.debug(f"Sent GETINFO query to {target}:{self.config.port}")
            except OSError as e:
                logger.warning(f"Unable to send query to {target}: {e}")
                result.issues.append(DiscoveryIssue(
                    kind=IssueKind.SEND,
                    message=f"Unable to send query to {target}: {e}",
                    target=target,
                ))

    def _receive_replies(self, deadline: Deadline, result: DiscoveryResult) -> None:
        """Read datagrams until the deadline, keeping those that decode.

        Each distinct receive error is recorded once. An error that leaves the
        socket unusable ends the loop early.
        """
        logger.info(f"Listening for replies on UDP port {self.config.port} ({deadline.timeout}s)...")
        reported_errors: set[str] = set()

        while not deadline.is_expired:
            remaining = deadline.remaining
            if remaining <= 0:
                break

            try:
                self._sock.settimeout(remaining)
                data, addr = self._sock.recvfrom(self.config.recv_buffer_size)
            except socket.timeout:
                continue
            except OSError as e:
                message = f"Unable to receive datagram: {e}"
                if message in reported_errors:
                    logger.debug(message)
                else:
                    reported_errors.add(message)
                    logger.warning(message)
                    result.issues.append(DiscoveryIssue(kind=IssueKind.RECEIVE, message=message))
                if e.errno in _UNUSABLE_SOCKET_ERRNOS:
                    logger.warning("Socket is no longer readable, stopping receive loop")
                    break
                continue

            device = decode_reply(data, addr[0])
            if device is None:
                result.discarded += 1
                continue

            logger.info(f"Found: {device}")
            result.devices.append(device)

    def close(self) -> None:
        """Close the UDP socket."""
        if self._sock:
            try:
                self._sock.close()
            except OSError:
                pass
            self._sock = None

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


def discover(config: Optional[DiscoveryConfig] = None, timeout: Optional[float] = None) -> DiscoveryResult:
    """Run a single discovery with default socket and interface handling."""
    return DiscoverySession(config).run(timeout=timeout)
