"""Multicast DNS modes and host-name generation."""

from __future__ import annotations

import enum
import uuid


class MulticastDNSMode(enum.IntEnum):
    """How the agent treats mDNS candidates."""

    # Remote mDNS candidates are discarded; local host candidates use IPs.
    DISABLED = 1
    # Remote mDNS candidates are accepted; local host candidates use IPs.
    QUERY_ONLY = 2
    # Remote mDNS candidates are accepted; local host candidates use mDNS.
    QUERY_AND_GATHER = 3


def generate_multicast_dns_name() -> str:
    """Return a version 4 UUID followed by ".local"."""
    return f"{uuid.uuid4()}.local"