from dataclasses import dataclass, field

import pytest

from icecore.candidate_pair import CandidatePair, format_pair
from icecore.candidate_type import CandidateType
from icecore.states import CandidatePairState

_COMPONENT_RTP = 1
_DEFAULT_LOCAL_PREFERENCE = 65535


@dataclass
class FakeCandidate:
    candidate_type: CandidateType
    component: int = _COMPONENT_RTP
    sent: list = field(default_factory=list, compare=False)

    def priority(self):
        return (
            (1 << 24) * self.candidate_type.preference()
            + (1 << 8) * _DEFAULT_LOCAL_PREFERENCE
            + 256
            - self.component
        )

    def write_to(self, data, remote):
        self.sent.append((bytes(data), remote))
        return len(data)

    def __str__(self):
        return str(self.candidate_type)


def host():
    return FakeCandidate(CandidateType.HOST)


def prflx():
    return FakeCandidate(CandidateType.PEER_REFLEXIVE)


def srflx():
    return FakeCandidate(CandidateType.SERVER_REFLEXIVE)


def relay():
    return FakeCandidate(CandidateType.RELAY)


@pytest.mark.parametrize(
    ("local", "remote", "controlling", "expected"),
    [
        (host, host, False, 9151314440652587007),
        (host, host, True, 9151314440652587007),
        (host, prflx, True, 7998392936314175488),
        (host, prflx, False, 7998392936314175487),
        (host, srflx, True, 7277816996102668288),
        (host, srflx, False, 7277816996102668287),
        (host, relay, True, 72057593987596288),
        (host, relay, False, 72057593987596287),
    ],
)
def test_candidate_pair_priority(local, remote, controlling, expected):
    pair = CandidatePair(local(), remote(), controlling)
    assert pair.priority() == expected


def test_candidate_pair_equality():
    pair_a = CandidatePair(host(), srflx(), True)
    pair_b = CandidatePair(host(), srflx(), False)
    assert pair_a.same_candidates(pair_b)


def test_candidate_pair_inequality():
    pair_a = CandidatePair(host(), srflx(), True)
    pair_b = CandidatePair(host(), relay(), True)
    assert not pair_a.same_candidates(pair_b)
    assert not pair_a.same_candidates(None)


def test_nil_candidate_pair_string():
    assert format_pair(None) == ""


def test_pair_string_describes_state():
    pair = CandidatePair(host(), srflx(), True)
    text = format_pair(pair)
    assert text.startswith(f"prio {pair.priority()} ")
    assert "host <-> srflx" in text
    assert text.endswith("state: waiting, nominated: false, nominateOnBindingSuccess: false")


def test_new_pair_starts_waiting():
    pair = CandidatePair(host(), host(), False)
    assert pair.state is CandidatePairState.WAITING
    assert pair.nominated is False


def test_write_sends_from_local_to_remote():
    local, remote = host(), srflx()
    pair = CandidatePair(local, remote, True)
    assert pair.write(b"hello") == 5
    assert local.sent == [(b"hello", remote)]