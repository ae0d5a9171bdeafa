"""Binary codec for the iBox GETINFO query and reply.

The query is the bare 4-byte header. Replies are decoded by walking the
declarative field table in schema.py with one generic fixed-width decoder.
"""

import logging
import string
import struct
from typing import Any, Iterable, Optional

from .constants import (
    HEADER_SIZE,
    QUERY_SIGNATURE,
    REPLY_MIN_LENGTH,
    REPLY_SIGNATURE,
    TEXT_ENCODING,
    CommandId,
)
from .schema import REPLY_BODY_FIELDS, REPLY_HEADER_FIELDS, DeviceInfo, FieldKind, ReplyField

logger = logging.getLogger(__name__)

# Characters stripped from the right of the network name
_TRIM_CHARS = "\x00" + string.whitespace

_STRUCT_CODES = {FieldKind.UINT8: "B", FieldKind.UINT16: "H"}

# Header struct format, built from the header field table
HEADER_FORMAT = ">" + "".join(_STRUCT_CODES[field.kind] for field in REPLY_HEADER_FIELDS)


class ReplyDecodeError(ValueError):
    """A reply region could not be decoded."""

    def __init__(self, field: ReplyField, reason: str):
        super().__init__(f"Cannot decode '{field.name}' at offset {field.offset}: {reason}")
        self.field = field


def encode_query(command: int = CommandId.GETINFO, size: int = HEADER_SIZE) -> bytes:
    """Build a query datagram.

    Args:
        command: Command id to request. Default: GETINFO.
        size: Total datagram length. Values above 4 zero-pad the header.

    Returns:
        The datagram bytes.

    Raises:
        ValueError: If size is smaller than the header.
    """
    if size < HEADER_SIZE:
        raise ValueError(f"Query size must be at least {HEADER_SIZE} bytes, got {size}")

    service, packet_type, _ = QUERY_SIGNATURE
    header = struct.pack(HEADER_FORMAT, service, packet_type, command)
    return header.ljust(size, b"\x00")


def decode_header(data: bytes) -> Optional[tuple[int, int, int]]:
    """Decode (service id, packet type, command id), or None if too short."""
    if len(data) < HEADER_SIZE:
        return None
    return struct.unpack_from(HEADER_FORMAT, data, 0)


def decode_field(data: bytes, field: ReplyField) -> Any:
    """Decode a single region according to its kind."""
    raw = data[field.offset:field.end]
    if len(raw) != field.size:
        raise ReplyDecodeError(field, f"need {field.size} bytes, got {len(raw)}")

    if field.kind == FieldKind.UINT8:
        # Unsigned 0-255; signed-byte readers show 0x80 as -128
        return raw[0]
    if field.kind == FieldKind.UINT16:
        return struct.unpack(">" + _STRUCT_CODES[field.kind], raw)[0]
    if field.kind == FieldKind.RAW:
        return bytes(raw)
    if field.kind in (FieldKind.TEXT, FieldKind.TRIMMED_TEXT):
        try:
            text = raw.decode(TEXT_ENCODING)
        except UnicodeDecodeError as e:
            raise ReplyDecodeError(field, f"non-{TEXT_ENCODING} byte at {e.start}") from e
        if field.kind == FieldKind.TRIMMED_TEXT:
            text = text.rstrip(_TRIM_CHARS)
        return text
    raise ReplyDecodeError(field, f"unsupported kind {field.kind!r}")


def decode_fixed_record(data: bytes, fields: Iterable[ReplyField]) -> dict[str, Any]:
    """Decode every non-skipped field of a fixed-width record.

    Args:
        data: Raw record bytes.
        fields: Field table, walked in order.

    Returns:
        Mapping of field name to decoded value.

    Raises:
        ReplyDecodeError: If any region is truncated or undecodable.
    """
    record: dict[str, Any] = {}
    for field in fields:
        if field.kind == FieldKind.SKIP:
            continue
        record[field.name] = decode_field(data, field)
    return record


def decode_reply(data: bytes, sender_ip: str) -> Optional[DeviceInfo]:
    """Decode a GETINFO reply datagram.

    Args:
        data: Datagram payload.
        sender_ip: Source address of the datagram.

    Returns:
        DeviceInfo, or None if the datagram is short, carries a different
        signature, or holds undecodable text.
    """
    if len(data) < REPLY_MIN_LENGTH:
        return None

    if decode_header(data) != REPLY_SIGNATURE:
        return None

    try:
        record = decode_fixed_record(data, REPLY_BODY_FIELDS)
    except ReplyDecodeError as e:
        logger.debug(f"Discarding reply from {sender_ip}: {e}")
        return None

    return DeviceInfo(ip_address=sender_ip, **record)
