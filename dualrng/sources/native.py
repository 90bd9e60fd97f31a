"""Concrete native sources.

``os`` reads the kernel CSPRNG and has nothing to seed. ``mersenne`` is the
interpreter's own generator reseeded from the clock, the analogue of
``srandom(time(NULL))`` / ``random()``. ``clock`` runs xoshiro128** seeded
from the clock and is only ever selected by name.
"""

from __future__ import annotations

import os
import random
import time

from dualrng.core.wrap32 import MASK32
from dualrng.core.xoshiro import Xoshiro128StarStar
from dualrng.sources.base import EntropySourceError


def _clock_seed() -> int:
    # High and low halves of the nanosecond clock, folded to 32 bits.
    now = time.time_ns()
    return ((now >> 32) ^ now) & MASK32


class OSEntropySource:
    name = "os"

    def reseed(self) -> None:
        pass

    def next_uint32(self) -> int:
        try:
            raw = os.urandom(4)
        except NotImplementedError as exc:
            raise EntropySourceError("os.urandom is not available on this platform") from exc
        return int.from_bytes(raw, "little")


class MersenneSource:
    name = "mersenne"

    def __init__(self) -> None:
        self._rng = random.Random()
        self.reseed()

    def reseed(self) -> None:
        self._rng.seed(_clock_seed())

    def next_uint32(self) -> int:
        return self._rng.getrandbits(32)


class ClockSeededSource:
    name = "clock"

    def __init__(self) -> None:
        self._core = Xoshiro128StarStar()
        self.reseed()

    def reseed(self) -> None:
        self._core.seed(_clock_seed())

    def next_uint32(self) -> int:
        return self._core.next_uint32()
