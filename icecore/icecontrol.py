"""ICE-CONTROLLED and ICE-CONTROLLING STUN attributes."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from .states import Role
from .stun import AttributeNotFoundError, AttrType, Message, check_size

_TIEBREAKER_SIZE = 8


def _add_tiebreaker(message: Message, value: int, attr_type: AttrType) -> None:
    message.add(attr_type, struct.pack("!Q", value))


def _get_tiebreaker(message: Message, attr_type: AttrType) -> int:
    value = message.get(attr_type)
    check_size(attr_type, len(value), _TIEBREAKER_SIZE)
    return struct.unpack("!Q", value)[0]


@dataclass(frozen=True)
class AttrControlled:
    """The ICE-CONTROLLED attribute carrying a tiebreaker."""

    tiebreaker: int = 0

    def add_to(self, message: Message) -> None:
        """Add ICE-CONTROLLED to the message."""
        _add_tiebreaker(message, self.tiebreaker, AttrType.ICE_CONTROLLED)

    @classmethod
    def get_from(cls, message: Message) -> AttrControlled:
        """Decode ICE-CONTROLLED from the message."""
        return cls(_get_tiebreaker(message, AttrType.ICE_CONTROLLED))


@dataclass(frozen=True)
class AttrControlling:
    """The ICE-CONTROLLING attribute carrying a tiebreaker."""

    tiebreaker: int = 0

    def add_to(self, message: Message) -> None:
        """Add ICE-CONTROLLING to the message."""
        _add_tiebreaker(message, self.tiebreaker, AttrType.ICE_CONTROLLING)

    @classmethod
    def get_from(cls, message: Message) -> AttrControlling:
        """Decode ICE-CONTROLLING from the message."""
        return cls(_get_tiebreaker(message, AttrType.ICE_CONTROLLING))


@dataclass(frozen=True)
class AttrControl:
    """ICE-CONTROLLED or ICE-CONTROLLING, chosen by role."""

    role: Role = Role.CONTROLLING
    tiebreaker: int = 0

    def add_to(self, message: Message) -> None:
        """Add the attribute that matches the role."""
        attr_type = (
            AttrType.ICE_CONTROLLING
            if self.role == Role.CONTROLLING
            else AttrType.ICE_CONTROLLED
        )
        _add_tiebreaker(message, self.tiebreaker, attr_type)

    @classmethod
    def get_from(cls, message: Message) -> AttrControl:
        """Decode the role and tiebreaker; controlling takes precedence."""
        if message.contains(AttrType.ICE_CONTROLLING):
            return cls(Role.CONTROLLING, _get_tiebreaker(message, AttrType.ICE_CONTROLLING))
        if message.contains(AttrType.ICE_CONTROLLED):
            return cls(Role.CONTROLLED, _get_tiebreaker(message, AttrType.ICE_CONTROLLED))
        raise AttributeNotFoundError()