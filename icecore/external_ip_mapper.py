"""1:1 NAT mapping of local IP addresses to external ones."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field

from .candidate_type import CandidateType
from .errors import (
    ExternalMappedIPNotFoundError,
    InvalidNAT1To1IPMappingError,
    UnsupportedNAT1To1IPCandidateTypeError,
)

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


def validate_ip_string(ip_str: str) -> tuple[IPAddress, bool]:
    """Parse an IP address; return it and whether it is IPv4."""
    if "%" in ip_str:
        raise InvalidNAT1To1IPMappingError()
    try:
        ip = ipaddress.ip_address(ip_str)
    except ValueError:
        raise InvalidNAT1To1IPMappingError() from None
    if isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped is not None:
        return ip.ipv4_mapped, True
    return ip, isinstance(ip, ipaddress.IPv4Address)


@dataclass
class IPMapping:
    """Local-to-external mapping for one IP family."""

    ip_sole: IPAddress | None = None
    ip_map: dict[str, IPAddress] = field(default_factory=dict)
    valid: bool = False

    def set_sole_ip(self, ip: IPAddress) -> None:
        """Use one external IP for every local IP of this family."""
        if self.ip_sole is not None or self.ip_map:
            raise InvalidNAT1To1IPMappingError()
        self.ip_sole = ip
        self.valid = True

    def add_ip_mapping(self, local_ip: IPAddress, external_ip: IPAddress) -> None:
        """Map one local IP to an external IP."""
        if self.ip_sole is not None:
            raise InvalidNAT1To1IPMappingError()
        key = str(local_ip)
        if key in self.ip_map:
            raise InvalidNAT1To1IPMappingError()
        self.ip_map[key] = external_ip
        self.valid = True

    def find_external_ip(self, local_ip: IPAddress) -> IPAddress:
        """Return the external IP; the local IP itself when nothing is mapped."""
        if not self.valid:
            return local_ip
        if self.ip_sole is not None:
            return self.ip_sole
        try:
            return self.ip_map[str(local_ip)]
        except KeyError:
            raise ExternalMappedIPNotFoundError() from None


@dataclass
class ExternalIPMapper:
    """1:1 NAT mappings for IPv4 and IPv6, applied to one candidate type."""

    ipv4_mapping: IPMapping = field(default_factory=IPMapping)
    ipv6_mapping: IPMapping = field(default_factory=IPMapping)
    candidate_type: CandidateType = CandidateType.HOST

    def find_external_ip(self, local_ip_str: str) -> IPAddress:
        """Find the external IP for a local IP given as a string."""
        local_ip, is_ipv4 = validate_ip_string(local_ip_str)
        mapping = self.ipv4_mapping if is_ipv4 else self.ipv6_mapping
        return mapping.find_external_ip(local_ip)


def new_external_ip_mapper(
    candidate_type: CandidateType, ips: list[str] | None
) -> ExternalIPMapper | None:
    """Build a mapper from "ext" or "ext/local" strings; None when ips is empty."""
    if not ips:
        return None
    if candidate_type == CandidateType.UNSPECIFIED:
        candidate_type = CandidateType.HOST
    elif candidate_type not in (CandidateType.HOST, CandidateType.SERVER_REFLEXIVE):
        raise UnsupportedNAT1To1IPCandidateTypeError()

    mapper = ExternalIPMapper(candidate_type=candidate_type)
    for entry in ips:
        parts = entry.split("/")
        if len(parts) > 2:
            raise InvalidNAT1To1IPMappingError()

        ext_ip, ext_is_v4 = validate_ip_string(parts[0])
        mapping = mapper.ipv4_mapping if ext_is_v4 else mapper.ipv6_mapping
        if len(parts) == 1:
            mapping.set_sole_ip(ext_ip)
            continue

        loc_ip, loc_is_v4 = validate_ip_string(parts[1])
        if ext_is_v4 != loc_is_v4:
            raise InvalidNAT1To1IPMappingError()
        mapping.add_ip_mapping(loc_ip, ext_ip)

    return mapper