"""Local interface enumeration and UDP listening in a port range."""

from __future__ import annotations

import ipaddress
import logging
import random
import secrets
import socket
from collections.abc import Callable, Iterable

import psutil

from .errors import PortError
from .network_type import NetworkType

_log = logging.getLogger(__name__)

_random = random.Random(secrets.randbits(64))

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


def is_supported_ipv6_partial(ip: bytes | IPAddress | str) -> bool:
    """Reject IPv4-compatible and site-local IPv6 addresses.

    Link-local filtering is left to the caller.
    """
    if isinstance(ip, str):
        ip = ipaddress.ip_address(ip)
    packed = ip.packed if isinstance(ip, ipaddress._BaseAddress) else bytes(ip)
    if len(packed) != 16:
        return False
    if not any(packed[:12]):
        return False
    if packed[0] == 0xFE and packed[1] & 0xC0 == 0xC0:
        return False
    return True


def _parse_interface_address(address: str) -> IPAddress | None:
    try:
        return ipaddress.ip_address(address.split("%", 1)[0])
    except ValueError:
        return None


def local_interfaces(
    interface_filter: Callable[[str], bool] | None = None,
    ip_filter: Callable[[IPAddress], bool] | None = None,
    network_types: Iterable[NetworkType] | None = None,
    include_loopback: bool = False,
) -> tuple[list[str], list[IPAddress]]:
    """Return the usable interface names and their IP addresses."""
    types = list(network_types or [])
    if types:
        ipv4_requested = any(t.is_ipv4() for t in types)
        ipv6_requested = any(t.is_ipv6() for t in types)
    else:
        ipv4_requested = ipv6_requested = True

    stats = psutil.net_if_stats()
    names: list[str] = []
    found: list[IPAddress] = []

    for name, iface_addrs in psutil.net_if_addrs().items():
        status = stats.get(name)
        if status is None or not status.isup:
            continue

        ips = [
            ip
            for ip in (
                _parse_interface_address(a.address)
                for a in iface_addrs
                if a.family in (socket.AF_INET, socket.AF_INET6)
            )
            if ip is not None
        ]
        is_loopback_iface = bool(ips) and all(ip.is_loopback for ip in ips)
        if is_loopback_iface and not include_loopback:
            continue
        if interface_filter is not None and not interface_filter(name):
            continue

        accepted = False
        for ip in ips:
            if ip.is_loopback and not include_loopback:
                continue
            if isinstance(ip, ipaddress.IPv6Address):
                if not ipv6_requested or not is_supported_ipv6_partial(ip):
                    continue
            elif not ipv4_requested:
                continue
            if ip_filter is not None and not ip_filter(ip):
                continue
            accepted = True
            found.append(ip)

        if accepted:
            names.append(name)

    return names, found


def _family_for(network: str, host: str) -> int:
    if network.endswith("6"):
        return socket.AF_INET6
    if network.endswith("4"):
        return socket.AF_INET
    return socket.AF_INET6 if ":" in host else socket.AF_INET


def _listen_udp(network: str, host: str, port: int) -> socket.socket:
    sock = socket.socket(_family_for(network, host), socket.SOCK_DGRAM)
    try:
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    return sock


def listen_udp_in_port_range(
    port_max: int,
    port_min: int,
    network: str,
    local_addr: tuple[str | IPAddress | None, int],
) -> socket.socket:
    """Bind a UDP socket, choosing a port in [port_min, port_max].

    A zero bound means 1024 for the minimum and 65535 for the maximum. The
    search starts at a random port and wraps around; PortError is raised when
    the range is invalid or every port in it is taken.
    """
    raw_host, port = local_addr
    host = "" if raw_host is None else str(raw_host)
    if port != 0 or (port_min == 0 and port_max == 0):
        return _listen_udp(network, host, port)

    low = port_min or 1024
    high = port_max or 0xFFFF
    if low > high:
        raise PortError()

    start = _random.randint(low, high)
    current = start
    while True:
        try:
            return _listen_udp(network, host, current)
        except OSError as exc:
            _log.debug("Failed to listen %s:%d: %s", host, current, exc)
        current += 1
        if current > high:
            current = low
        if current == start:
            break
    raise PortError()