"""Random identifiers and credentials."""

from __future__ import annotations

import random
import secrets
import threading

_RUNES_ALPHA = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
_RUNES_DIGIT = "0123456789"
_RUNES_CANDIDATE_ID_FOUNDATION = _RUNES_ALPHA + _RUNES_DIGIT + "+/"

_LEN_UFRAG = 16
_LEN_PWD = 32
_LEN_FOUNDATION = 32


class CandidateIDGenerator:
    """Generates candidate IDs; they are public, so no crypto-grade randomness."""

    def __init__(self) -> None:
        self._random = random.Random(secrets.randbits(64))
        self._lock = threading.Lock()

    def generate(self) -> str:
        """Return "candidate:" followed by 32 ice-chars."""
        with self._lock:
            foundation = "".join(
                self._random.choices(_RUNES_CANDIDATE_ID_FOUNDATION, k=_LEN_FOUNDATION)
            )
        return "candidate:" + foundation


def _crypto_random_string(length: int, runes: str) -> str:
    return "".join(secrets.choice(runes) for _ in range(length))


def generate_pwd() -> str:
    """Generate an ICE password of 32 random letters."""
    return _crypto_random_string(_LEN_PWD, _RUNES_ALPHA)


def generate_ufrag() -> str:
    """Generate an ICE username fragment of 16 random letters."""
    return _crypto_random_string(_LEN_UFRAG, _RUNES_ALPHA)