"""Network types (transport protocol plus IP family)."""

from __future__ import annotations

import enum
import ipaddress

from .errors import DetermineNetworkTypeError

_UDP = "udp"
_TCP = "tcp"

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


class NetworkType(enum.IntEnum):
    """A transport protocol over an IP family."""

    UDP4 = 1
    UDP6 = 2
    TCP4 = 3
    TCP6 = 4

    def __str__(self) -> str:
        return self.name.lower()

    def is_udp(self) -> bool:
        """True for UDP over IPv4 or IPv6."""
        return self in (NetworkType.UDP4, NetworkType.UDP6)

    def is_tcp(self) -> bool:
        """True for TCP over IPv4 or IPv6."""
        return self in (NetworkType.TCP4, NetworkType.TCP6)

    def network_short(self) -> str:
        """The protocol name without the IP family: "udp" or "tcp"."""
        return _UDP if self.is_udp() else _TCP

    def is_reliable(self) -> bool:
        """True when the transport is reliable (TCP)."""
        return self.is_tcp()

    def is_ipv4(self) -> bool:
        """True when the network runs over IPv4."""
        return self in (NetworkType.UDP4, NetworkType.TCP4)

    def is_ipv6(self) -> bool:
        """True when the network runs over IPv6."""
        return self in (NetworkType.UDP6, NetworkType.TCP6)


def supported_network_types() -> list[NetworkType]:
    """All network types the agent supports, in preference order."""
    return [NetworkType.UDP4, NetworkType.UDP6, NetworkType.TCP4, NetworkType.TCP6]


def _unmap(ip: IPAddress) -> IPAddress:
    if isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped is not None:
        return ip.ipv4_mapped
    return ip


def determine_network_type(network: str, ip: IPAddress | str) -> NetworkType:
    """Derive the network type from a short network name and an IP address.

    IPv4-mapped IPv6 addresses count as IPv4.
    """
    if isinstance(ip, str):
        ip = ipaddress.ip_address(ip)
    ip = _unmap(ip)
    is_v4 = isinstance(ip, ipaddress.IPv4Address)
    lowered = network.lower()
    if lowered.startswith(_UDP):
        return NetworkType.UDP4 if is_v4 else NetworkType.UDP6
    if lowered.startswith(_TCP):
        return NetworkType.TCP4 if is_v4 else NetworkType.TCP6
    raise DetermineNetworkTypeError(
        f"{DetermineNetworkTypeError.default_message} from {network} {ip}"
    )