"""Reply builders and a scripted UDP socket for tests."""

import socket
import struct
import time

from ibox_discover.protocol.constants import REPLY_SIGNATURE


def make_reply(
    name: bytes = b"TESTNET",
    netmask: bytes = b"255.255.255.0",
    product: bytes = b"RT-AC68U",
    firmware: bytes = b"3.0.0.4",
    mode: int = 1,
    mac: bytes = bytes.fromhex("001122334455"),
    region: int = 2,
    header: tuple = REPLY_SIGNATURE,
    size: int = 256,
) -> bytes:
    """Build a GETINFO reply with NUL-padded text fields."""
    body = bytearray(size)
    struct.pack_into(">BBH", body, 0, *header)
    body[4:8] = b"\xaa\xbb\xcc\xdd"
    body[8:136] = b"\x7f" * 128
    body[136:168] = name.ljust(32, b"\x00")
    body[168:200] = netmask.ljust(32, b"\x00")
    body[200:232] = product.ljust(32, b"\x00")
    body[232:248] = firmware.ljust(16, b"\x00")
    body[248] = mode
    body[249:255] = mac
    body[255] = region
    return bytes(body)


class FakeSocket:
    """Scripted stand-in for a UDP socket.

    `incoming` items are (data, (ip, port)) tuples or exceptions to raise.
    Once the script is exhausted, recvfrom waits out the timeout (capped)
    and raises socket.timeout.
    """

    def __init__(self, incoming=None, send_errors=None, bind_error=None):
        self.incoming = list(incoming or [])
        self.send_errors = dict(send_errors or {})
        self.bind_error = bind_error
        self.options = {}
        self.bound = None
        self.sent = []
        self.timeouts = []
        self.closed = False

    def setsockopt(self, level, option, value):
        self.options[(level, option)] = value

    def bind(self, address):
        if self.bind_error:
            raise self.bind_error
        self.bound = address

    def sendto(self, data, address):
        error = self.send_errors.get(address[0])
        if error:
            raise error
        self.sent.append((data, address))
        return len(data)

    def settimeout(self, value):
        self.timeouts.append(value)

    def recvfrom(self, bufsize):
        if self.incoming:
            item = self.incoming.pop(0)
            if isinstance(item, BaseException):
                raise item
            data, addr = item
            return data[:bufsize], addr
        time.sleep(min(self.timeouts[-1] if self.timeouts else 0.01, 0.02))
        raise socket.timeout("timed out")

    def close(self):
        self.closed = True
