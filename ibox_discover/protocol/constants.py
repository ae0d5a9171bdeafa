"""iBox discovery protocol constants.

Values mirror the device firmware's ibox.h header. Encoder and decoder both
read from here, so a signature never drifts between the two.
"""

from enum import IntEnum

# UDP port used for both the query and the reply
IBOX_SRV_PORT = 9999

NET_SERVICE_ID_BASE = 0x0A
NET_PACKET_TYPE_BASE = 0x14
NET_CMD_ID_BASE = 0x1E
NET_CMD_ID_MANU_BASE = 0x32


class ServiceId(IntEnum):
    """Device subsystem a packet is addressed to."""
    LPT_EMU = NET_SERVICE_ID_BASE + 1
    IBOX_INFO = NET_SERVICE_ID_BASE + 2


class PacketType(IntEnum):
    """Command vs. response tag."""
    CMD = NET_PACKET_TYPE_BASE + 1
    RES = NET_PACKET_TYPE_BASE + 2


class CommandId(IntEnum):
    """Operations understood by the info service."""
    GETINFO = NET_CMD_ID_BASE + 1
    GETINFO_EX = NET_CMD_ID_BASE + 2
    GETINFO_SITES = NET_CMD_ID_BASE + 3
    SETINFO = NET_CMD_ID_BASE + 4
    SETSYSTEM = NET_CMD_ID_BASE + 5
    GETINFO_PROF = NET_CMD_ID_BASE + 6
    SETINFO_PROF = NET_CMD_ID_BASE + 7
    CHECK_PASS = NET_CMD_ID_BASE + 8
    SETKEY_EX = NET_CMD_ID_BASE + 9
    QUICKGW_EX = NET_CMD_ID_BASE + 10
    EZPROBE = NET_CMD_ID_BASE + 11
    MANU_CMD = NET_CMD_ID_MANU_BASE + 1
    GETINFO_MANU = NET_CMD_ID_MANU_BASE + 2
    GETINFO_EX2 = NET_CMD_ID_MANU_BASE + 3


# Length of the (service, packet type, command) header
HEADER_SIZE = 4

QUERY_SIGNATURE = (ServiceId.IBOX_INFO, PacketType.CMD, CommandId.GETINFO)
REPLY_SIGNATURE = (ServiceId.IBOX_INFO, PacketType.RES, CommandId.GETINFO)

# Shortest datagram that carries every GETINFO reply field
REPLY_MIN_LENGTH = 256

# Receive buffer the firmware's own tooling uses
DEFAULT_RECV_BUFFER = 512

# Fixed-width text is single-byte ASCII
TEXT_ENCODING = "ascii"
