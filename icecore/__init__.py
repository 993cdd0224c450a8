"""Building blocks for Interactive Connectivity Establishment agents."""

__version__ = "0.1.0"

__all__ = [
    "candidate_pair",
    "candidate_type",
    "errors",
    "external_ip_mapper",
    "icecontrol",
    "mdns",
    "network_type",
    "netutil",
    "packet_conn",
    "priority",
    "rand",
    "states",
    "stats",
    "stun",
    "taskloop",
]