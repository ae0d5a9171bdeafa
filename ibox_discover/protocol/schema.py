"""Data models for the iBox GETINFO exchange.

Defines the decoded device record and the declarative reply layout.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class FieldKind(str, Enum):
    """How a fixed-width reply region is decoded."""
    SKIP = "skip"
    UINT8 = "uint8"
    UINT16 = "uint16"
    TEXT = "text"
    TRIMMED_TEXT = "trimmed_text"
    RAW = "raw"


@dataclass(frozen=True)
class ReplyField:
    """One region of the reply payload."""
    name: str
    offset: int
    size: int
    kind: FieldKind

    @property
    def end(self) -> int:
        return self.offset + self.size


# Reply header; checked against REPLY_SIGNATURE before the body is read
REPLY_HEADER_FIELDS = (
    ReplyField("service_id", 0, 1, FieldKind.UINT8),
    ReplyField("packet_type", 1, 1, FieldKind.UINT8),
    ReplyField("command_id", 2, 2, FieldKind.UINT16),
)

REPLY_BODY_FIELDS = (
    ReplyField("info", 4, 4, FieldKind.SKIP),
    ReplyField("printer_info", 8, 128, FieldKind.SKIP),
    ReplyField("network_name", 136, 32, FieldKind.TRIMMED_TEXT),
    ReplyField("subnet_mask", 168, 32, FieldKind.TEXT),
    ReplyField("product_id", 200, 32, FieldKind.TEXT),
    ReplyField("firmware_version", 232, 16, FieldKind.TEXT),
    ReplyField("operation_mode", 248, 1, FieldKind.UINT8),
    ReplyField("hardware_address", 249, 6, FieldKind.RAW),
    ReplyField("region", 255, 1, FieldKind.UINT8),
)

REPLY_FIELDS = REPLY_HEADER_FIELDS + REPLY_BODY_FIELDS


def format_hardware_address(raw: bytes) -> str:
    """Render raw bytes as lowercase colon-separated hex pairs."""
    return ":".join(f"{b:02x}" for b in raw)


@dataclass(frozen=True)
class DeviceInfo:
    """A device decoded from one GETINFO reply."""
    network_name: str
    subnet_mask: str
    product_id: str
    firmware_version: str
    operation_mode: int
    hardware_address: bytes
    ip_address: str
    region: int

    @property
    def mac(self) -> str:
        """Hardware address as aa:bb:cc:dd:ee:ff."""
        return format_hardware_address(self.hardware_address)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "network_name": self.network_name,
            "ip_address": self.ip_address,
            "subnet_mask": self.subnet_mask,
            "product_id": self.product_id,
            "firmware_version": self.firmware_version,
            "operation_mode": self.operation_mode,
            "hardware_address": self.mac,
            "region": self.region,
        }

    def __str__(self) -> str:
        return f"{self.network_name or '<unnamed>'} at {self.ip_address} ({self.mac})"
