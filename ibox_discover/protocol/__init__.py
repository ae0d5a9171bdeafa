"""Protocol module - iBox GETINFO packet layout and codec."""

from .codec import (
    ReplyDecodeError,
    decode_field,
    decode_fixed_record,
    decode_header,
    decode_reply,
    encode_query,
)
from .constants import (
    IBOX_SRV_PORT,
    QUERY_SIGNATURE,
    REPLY_MIN_LENGTH,
    REPLY_SIGNATURE,
    CommandId,
    PacketType,
    ServiceId,
)
from .schema import REPLY_FIELDS, DeviceInfo, FieldKind, ReplyField, format_hardware_address

__all__ = [
    "IBOX_SRV_PORT",
    "QUERY_SIGNATURE",
    "REPLY_MIN_LENGTH",
    "REPLY_SIGNATURE",
    "REPLY_FIELDS",
    "CommandId",
    "PacketType",
    "ServiceId",
    "DeviceInfo",
    "FieldKind",
    "ReplyField",
    "ReplyDecodeError",
    "decode_field",
    "decode_fixed_record",
    "decode_header",
    "decode_reply",
    "encode_query",
    "format_hardware_address",
]
