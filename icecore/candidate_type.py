"""Candidate types and related transport addresses."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_UNKNOWN_CANDIDATE_TYPE = "Unknown candidate type"


class CandidateType(enum.IntEnum):
    """The type of an ICE candidate."""

    UNSPECIFIED = 0
    HOST = 1
    SERVER_REFLEXIVE = 2
    PEER_REFLEXIVE = 3
    RELAY = 4

    def __str__(self) -> str:
        return _TYPE_LABELS.get(self, _UNKNOWN_CANDIDATE_TYPE)

    def preference(self) -> int:
        """Type preference: 126 host, 110 prflx, 100 srflx, 0 relay."""
        return _TYPE_PREFERENCES[self]


_TYPE_LABELS = {
    CandidateType.HOST: "host",
    CandidateType.SERVER_REFLEXIVE: "srflx",
    CandidateType.PEER_REFLEXIVE: "prflx",
    CandidateType.RELAY: "relay",
}

_TYPE_PREFERENCES = {
    CandidateType.HOST: 126,
    CandidateType.PEER_REFLEXIVE: 110,
    CandidateType.SERVER_REFLEXIVE: 100,
    CandidateType.RELAY: 0,
    CandidateType.UNSPECIFIED: 0,
}


@dataclass(frozen=True)
class CandidateRelatedAddress:
    """A transport address related to a candidate, used for diagnostics."""

    address: str
    port: int

    def __str__(self) -> str:
        return f" related {self.address}:{self.port}"


def format_related_address(address: CandidateRelatedAddress | None) -> str:
    """Render a related address, or the empty string when there is none."""
    if address is None:
        return ""
    return str(address)