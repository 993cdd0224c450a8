"""The PRIORITY STUN attribute."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from .stun import AttrType, Message, check_size

_PRIORITY_SIZE = 4


@dataclass(frozen=True)
class PriorityAttr:
    """The PRIORITY attribute: a 32-bit candidate priority."""

    value: int = 0

    def add_to(self, message: Message) -> None:
        """Add PRIORITY to the message."""
        message.add(AttrType.PRIORITY, struct.pack("!I", self.value))

    @classmethod
    def get_from(cls, message: Message) -> PriorityAttr:
        """Decode PRIORITY from the message."""
        value = message.get(AttrType.PRIORITY)
        check_size(AttrType.PRIORITY, len(value), _PRIORITY_SIZE)
        return cls(struct.unpack("!I", value)[0])