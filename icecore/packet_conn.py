"""A connected socket presented as a packet-oriented connection."""

from __future__ import annotations

import socket
from typing import Any


class PacketConn:
    """Wraps a connected socket so it can be used like a packet socket.

    Reads report the peer as the source address; writes ignore the
    destination and go to the connected peer.
    """

    def __init__(self, conn: socket.socket) -> None:
        self.conn = conn

    def __enter__(self) -> PacketConn:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def local_addr(self) -> Any:
        """The local address of the wrapped connection."""
        return self.conn.getsockname()

    @property
    def remote_addr(self) -> Any:
        """The peer address of the wrapped connection."""
        return self.conn.getpeername()

    def read_from(self, size: int) -> tuple[bytes, Any]:
        """Read up to size bytes; return them with the peer address."""
        data = self.conn.recv(size)
        return data, self.conn.getpeername()

    def write_to(self, data: bytes, addr: Any = None) -> int:
        """Write data to the connected peer; addr is ignored."""
        self.conn.sendall(data)
        return len(data)

    def close(self) -> None:
        """Close the wrapped connection."""
        self.conn.close()