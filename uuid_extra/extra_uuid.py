"""Generation of version 4 and version 7 UUIDs and v7 timestamp extraction."""

from __future__ import annotations

import secrets
import threading
import time
import uuid
from uuid import UUID

from uuid_extra.errors import FailExtractTimeNoUuidV7Error

_COUNTER_BITS = 74
_COUNTER_MAX = (1 << _COUNTER_BITS) - 1
_RAND_B_BITS = 62
_RAND_B_MASK = (1 << _RAND_B_BITS) - 1


class _V7Generator:
    """Produces monotonically increasing version 7 UUIDs."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last_ms = -1
        self._counter = 0

    @staticmethod
    def _fresh_counter() -> int:
        # Leave the top bit clear so increments within a millisecond have room.
        return secrets.randbits(_COUNTER_BITS - 1)

    def next(self) -> UUID:
        now_ms = time.time_ns() // 1_000_000
        with self._lock:
            if now_ms > self._last_ms:
                self._last_ms = now_ms
                self._counter = self._fresh_counter()
            else:
                self._counter += 1
                if self._counter > _COUNTER_MAX:
                    self._last_ms += 1
                    self._counter = self._fresh_counter()
            ms, counter = self._last_ms, self._counter

        rand_a = counter >> _RAND_B_BITS
        rand_b = counter & _RAND_B_MASK
        value = (
            (ms & ((1 << 48) - 1)) << 80
            | 0x7 << 76
            | rand_a << 64
            | 0b10 << 62
            | rand_b
        )
        return UUID(int=value)


_generator = _V7Generator()


def new_v4() -> UUID:
    """Generate a random version 4 UUID."""
    return uuid.uuid4()


def now_v7() -> UUID:
    """Generate a time-ordered version 7 UUID for the current time."""
    return _generator.next()


def new_v7() -> UUID:
    """Alias of :func:`now_v7`."""
    return now_v7()


def to_time_epoch_ms(uuid: UUID) -> int:
    """Return the milliseconds since the epoch embedded in a version 7 UUID."""
    if (uuid.int >> 76) & 0xF != 7:
        raise FailExtractTimeNoUuidV7Error(uuid)
    return uuid.int >> 80