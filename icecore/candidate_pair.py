"""A pairing of a local and a remote candidate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from .states import CandidatePairState


class _Candidate(Protocol):
    def priority(self) -> int: ...

    def write_to(self, data: bytes, remote: Any) -> int: ...


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


@dataclass(eq=False)
class CandidatePair:
    """A local and a remote candidate checked together."""

    local: _Candidate
    remote: _Candidate
    ice_role_controlling: bool
    state: CandidatePairState = CandidatePairState.WAITING
    binding_request_count: int = 0
    nominated: bool = False
    nominate_on_binding_success: bool = False

    def __str__(self) -> str:
        return (
            f"prio {self.priority()} (local, prio {self.local.priority()}) "
            f"{self.local} <-> {self.remote} (remote, prio {self.remote.priority()}), "
            f"state: {self.state}, nominated: {_bool_text(self.nominated)}, "
            f"nominateOnBindingSuccess: {_bool_text(self.nominate_on_binding_success)}"
        )

    def priority(self) -> int:
        """Pair priority per RFC 5245 section 5.7.2.

        G is the controlling agent's candidate priority, D the controlled one's.
        """
        if self.ice_role_controlling:
            g, d = self.local.priority(), self.remote.priority()
        else:
            g, d = self.remote.priority(), self.local.priority()
        return (2**32 - 1) * min(g, d) + 2 * max(g, d) + (1 if g > d else 0)

    def same_candidates(self, other: CandidatePair | None) -> bool:
        """True when both pairs hold equal local and remote candidates."""
        if other is None:
            return False
        return self.local == other.local and self.remote == other.remote

    def write(self, data: bytes) -> int:
        """Send data from the local candidate to the remote one."""
        return self.local.write_to(data, self.remote)


def format_pair(pair: CandidatePair | None) -> str:
    """Render a pair, or the empty string when there is none."""
    if pair is None:
        return ""
    return str(pair)