"""A minimal STUN message codec and the ICE-specific STUN helpers."""

from __future__ import annotations

import enum
import ipaddress
import secrets
import socket
import struct
from dataclasses import dataclass, field
from typing import ClassVar

_MAGIC_COOKIE = 0x2112A442
_HEADER_SIZE = 20
_TRANSACTION_ID_SIZE = 12
_ATTR_HEADER_SIZE = 4
_MAX_MESSAGE_SIZE = 1280

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


class StunError(Exception):
    """Base class of STUN errors."""


class AttributeNotFoundError(StunError, LookupError):
    """The requested attribute is not in the message."""

    def __init__(self, message: str = "attribute not found") -> None:
        super().__init__(message)


class AttributeSizeError(StunError, ValueError):
    """An attribute value has the wrong length."""


class DecodeError(StunError, ValueError):
    """A STUN message or attribute is malformed."""


class XorMappedAddressError(StunError):
    """The response carried no usable XOR-MAPPED-ADDRESS."""


class UsernameMismatchError(StunError):
    """The USERNAME attribute does not hold the expected value."""


class AttrType(enum.IntEnum):
    """STUN attribute types used by ICE."""

    MAPPED_ADDRESS = 0x0001
    USERNAME = 0x0006
    MESSAGE_INTEGRITY = 0x0008
    ERROR_CODE = 0x0009
    XOR_MAPPED_ADDRESS = 0x0020
    PRIORITY = 0x0024
    USE_CANDIDATE = 0x0025
    FINGERPRINT = 0x8028
    ICE_CONTROLLED = 0x8029
    ICE_CONTROLLING = 0x802A


def _attr_name(attr_type: int) -> str:
    try:
        return AttrType(attr_type).name
    except ValueError:
        return f"0x{attr_type:04x}"


def _padded(length: int) -> int:
    return (length + 3) // 4 * 4


def check_size(attr_type: int, got: int, expected: int) -> None:
    """Raise AttributeSizeError unless an attribute has the expected length."""
    if got != expected:
        raise AttributeSizeError(
            f"incorrect length of {_attr_name(attr_type)} attribute: "
            f"got {got}, expected {expected}"
        )


@dataclass
class Message:
    """A STUN message: type, transaction ID and ordered attributes."""

    BINDING_REQUEST: ClassVar[int] = 0x0001
    BINDING_SUCCESS: ClassVar[int] = 0x0101

    message_type: int = 0x0001
    transaction_id: bytes = field(
        default_factory=lambda: secrets.token_bytes(_TRANSACTION_ID_SIZE)
    )
    attributes: list[tuple[int, bytes]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.transaction_id) != _TRANSACTION_ID_SIZE:
            raise ValueError("transaction ID must be 12 bytes")
        if not 0 <= self.message_type <= 0x3FFF:
            raise ValueError("message type must fit in 14 bits")

    def add(self, attr_type: int, value: bytes) -> None:
        """Append an attribute."""
        if len(value) > 0xFFFF:
            raise ValueError("attribute value too long")
        self.attributes.append((int(attr_type), bytes(value)))

    def get(self, attr_type: int) -> bytes:
        """Return the value of the first attribute of this type."""
        wanted = int(attr_type)
        for kind, value in self.attributes:
            if kind == wanted:
                return value
        raise AttributeNotFoundError()

    def contains(self, attr_type: int) -> bool:
        """True when the message holds an attribute of this type."""
        wanted = int(attr_type)
        return any(kind == wanted for kind, _ in self.attributes)

    def encode(self) -> bytes:
        """Serialise the message to wire format."""
        body = b"".join(
            struct.pack("!HH", kind, len(value))
            + value
            + b"\x00" * (_padded(len(value)) - len(value))
            for kind, value in self.attributes
        )
        header = struct.pack("!HHI", self.message_type, len(body), _MAGIC_COOKIE)
        return header + self.transaction_id + body

    @classmethod
    def decode(cls, data: bytes) -> Message:
        """Parse a message from wire format."""
        if len(data) < _HEADER_SIZE:
            raise DecodeError("message is shorter than the STUN header")
        message_type, length, cookie = struct.unpack_from("!HHI", data)
        if message_type & 0xC000:
            raise DecodeError("first two bits of the message type must be zero")
        if cookie != _MAGIC_COOKIE:
            raise DecodeError(f"{cookie:#x} is an invalid magic cookie")
        if _HEADER_SIZE + length > len(data):
            raise DecodeError("message length exceeds the data")
        transaction_id = bytes(data[8:_HEADER_SIZE])
        body = bytes(data[_HEADER_SIZE : _HEADER_SIZE + length])

        attributes: list[tuple[int, bytes]] = []
        offset = 0
        while offset < len(body):
            if len(body) - offset < _ATTR_HEADER_SIZE:
                raise DecodeError("truncated attribute header")
            kind, attr_len = struct.unpack_from("!HH", body, offset)
            start = offset + _ATTR_HEADER_SIZE
            end = start + attr_len
            if end > len(body):
                raise DecodeError(f"truncated {_attr_name(kind)} attribute")
            attributes.append((kind, body[start:end]))
            offset = start + _padded(attr_len)
        return cls(message_type, transaction_id, attributes)


def _coerce_ip(ip: IPAddress | str | bytes) -> IPAddress:
    if isinstance(ip, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return ip
    return ipaddress.ip_address(ip)


@dataclass(frozen=True)
class XORMappedAddress:
    """The XOR-MAPPED-ADDRESS attribute."""

    ip: IPAddress
    port: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "ip", _coerce_ip(self.ip))
        if not 0 <= self.port <= 0xFFFF:
            raise ValueError("port out of range")

    def add_to(self, message: Message) -> None:
        """Add the attribute to a message, obfuscated with its transaction ID."""
        key = struct.pack("!I", _MAGIC_COOKIE) + message.transaction_id
        packed = self.ip.packed
        family = 0x01 if len(packed) == 4 else 0x02
        xored = bytes(b ^ k for b, k in zip(packed, key))
        header = struct.pack("!BBH", 0, family, self.port ^ (_MAGIC_COOKIE >> 16))
        message.add(AttrType.XOR_MAPPED_ADDRESS, header + xored)

    @classmethod
    def get_from(cls, message: Message) -> XORMappedAddress:
        """Decode the attribute from a message."""
        value = message.get(AttrType.XOR_MAPPED_ADDRESS)
        if len(value) < _ATTR_HEADER_SIZE:
            raise DecodeError("XOR-MAPPED-ADDRESS is too short")
        _, family, xport = struct.unpack_from("!BBH", value)
        if family == 0x01:
            ip_len = 4
        elif family == 0x02:
            ip_len = 16
        else:
            raise DecodeError(f"unknown address family {family:#x}")
        check_size(AttrType.XOR_MAPPED_ADDRESS, len(value), _ATTR_HEADER_SIZE + ip_len)
        key = struct.pack("!I", _MAGIC_COOKIE) + message.transaction_id
        raw = bytes(b ^ k for b, k in zip(value[_ATTR_HEADER_SIZE:], key))
        return cls(ipaddress.ip_address(raw), xport ^ (_MAGIC_COOKIE >> 16))


def binding_request() -> Message:
    """A new Binding request with a random transaction ID."""
    return Message(Message.BINDING_REQUEST)


def get_xor_mapped_address(
    sock: socket.socket,
    server_addr: tuple,
    timeout: float | None,
) -> XORMappedAddress:
    """Send a Binding request to server_addr and return the mapped address.

    A positive timeout, in seconds, bounds the wait for the reply; the
    socket's previous timeout is restored afterwards.
    """
    previous = sock.gettimeout()
    if timeout is not None and timeout > 0:
        sock.settimeout(timeout)
    try:
        request = binding_request()
        sock.sendto(request.encode(), server_addr)
        data, _ = sock.recvfrom(_MAX_MESSAGE_SIZE)
    finally:
        sock.settimeout(previous)

    response = Message.decode(data)
    try:
        return XORMappedAddress.get_from(response)
    except StunError as exc:
        raise XorMappedAddressError(
            f"failed to get XOR-MAPPED-ADDRESS response: {exc}"
        ) from exc


def assert_username(message: Message, expected_username: str) -> None:
    """Raise unless the message's USERNAME equals expected_username."""
    actual = message.get(AttrType.USERNAME)
    expected = expected_username.encode("utf-8")
    if actual != expected:
        raise UsernameMismatchError(
            f"username mismatch expected({expected.hex()}) actual({actual.hex()})"
        )