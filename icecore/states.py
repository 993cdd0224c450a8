"""Connection, gathering and pair states, and the agent role."""

from __future__ import annotations

import enum

from .errors import UnknownRoleError


class ConnectionState(enum.IntEnum):
    """State of an ICE connection."""

    UNKNOWN = 0
    NEW = 1
    CHECKING = 2
    CONNECTED = 3
    COMPLETED = 4
    FAILED = 5
    DISCONNECTED = 6
    CLOSED = 7

    def __str__(self) -> str:
        if self is ConnectionState.UNKNOWN:
            return "Invalid"
        return self.name.capitalize()


class GatheringState(enum.IntEnum):
    """State of the candidate gathering process."""

    UNKNOWN = 0
    NEW = 1
    GATHERING = 2
    COMPLETE = 3

    def __str__(self) -> str:
        if self is GatheringState.UNKNOWN:
            return "Unknown"
        return self.name.lower()


class CandidatePairState(enum.IntEnum):
    """State of a candidate pair's connectivity check."""

    WAITING = 1
    IN_PROGRESS = 2
    FAILED = 3
    SUCCEEDED = 4

    def __str__(self) -> str:
        return self.name.lower().replace("_", "-")


class Role(enum.IntEnum):
    """ICE agent role."""

    CONTROLLING = 0
    CONTROLLED = 1

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def from_text(cls, text: str | bytes) -> Role:
        """Parse "controlling" or "controlled"."""
        if isinstance(text, (bytes, bytearray)):
            text = bytes(text).decode("utf-8", errors="replace")
        for role in cls:
            if str(role) == text:
                return role
        raise UnknownRoleError(f'{UnknownRoleError.default_message} "{text}"')