"""Statistics reported for candidates and candidate pairs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .candidate_type import CandidateType
from .network_type import NetworkType
from .states import CandidatePairState


@dataclass
class CandidatePairStats:
    """ICE candidate pair statistics.

    Timestamps are None until the event they describe has happened.
    Round-trip times are in seconds, bitrates in bits per second.
    """

    timestamp: datetime | None = None
    local_candidate_id: str = ""
    remote_candidate_id: str = ""
    state: CandidatePairState | None = None
    nominated: bool = False
    packets_sent: int = 0
    packets_received: int = 0
    bytes_sent: int = 0
    bytes_received: int = 0
    last_packet_sent_timestamp: datetime | None = None
    last_packet_received_timestamp: datetime | None = None
    first_request_timestamp: datetime | None = None
    last_request_timestamp: datetime | None = None
    last_response_timestamp: datetime | None = None
    total_round_trip_time: float = 0.0
    current_round_trip_time: float = 0.0
    available_outgoing_bitrate: float = 0.0
    available_incoming_bitrate: float = 0.0
    circuit_breaker_trigger_count: int = 0
    requests_received: int = 0
    requests_sent: int = 0
    responses_received: int = 0
    responses_sent: int = 0
    retransmissions_received: int = 0
    retransmissions_sent: int = 0
    consent_requests_sent: int = 0
    consent_expired_timestamp: datetime | None = None


@dataclass
class CandidateStats:
    """ICE candidate statistics.

    network_type and relay_protocol are only meaningful for local candidates;
    deleted is only defined for local candidates.
    """

    timestamp: datetime | None = None
    id: str = ""
    network_type: NetworkType | None = None
    ip: str = ""
    port: int = 0
    candidate_type: CandidateType = CandidateType.UNSPECIFIED
    priority: int = 0
    url: str = ""
    relay_protocol: str = ""
    deleted: bool = False