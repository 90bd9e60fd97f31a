"""Dual-mode random number generator.

``set_seed(0)`` selects native mode and reseeds the injected entropy source.
Any other seed selects deterministic mode and reseeds xoshiro128** through
SplitMix32 expansion, so a nonzero seed reproduces the same stream on every
platform. A fresh generator starts in native mode.
"""

from __future__ import annotations

import operator
import threading

import numpy as np

from dualrng.core.wrap32 import MASK32
from dualrng.core.xoshiro import Xoshiro128StarStar
from dualrng.sources.base import EntropySource
from dualrng.sources.resolve import resolve_source

MODE_NATIVE = "native"
MODE_DETERMINISTIC = "deterministic"


class DualModeRNG:
    def __init__(self, source: EntropySource | None = None, seed: int | None = None) -> None:
        self.source = source if source is not None else resolve_source("auto")
        self._core = Xoshiro128StarStar()
        self._lock = threading.Lock()
        self._mode = MODE_NATIVE
        self.source.reseed()
        if seed is not None:
            self.set_seed(seed)

    @property
    def mode(self) -> str:
        return self._mode

    @property
    def deterministic(self) -> bool:
        return self._mode == MODE_DETERMINISTIC

    @property
    def state(self) -> tuple[int, int, int, int]:
        """Core state words; meaningful only in deterministic mode."""
        with self._lock:
            return self._core.getstate()

    def set_seed(self, seed: int) -> None:
        """Select the mode from *seed* and reseed the matching generator.

        Seeds are reduced modulo 2**32, so ``-1`` means ``0xFFFFFFFF`` and
        ``2**32`` means native mode.
        """
        value = operator.index(seed) & MASK32
        with self._lock:
            if value == 0:
                self._mode = MODE_NATIVE
                self.source.reseed()
            else:
                self._mode = MODE_DETERMINISTIC
                self._core.seed(value)

    def next_uint32(self) -> int:
        with self._lock:
            return self._next_unlocked()

    def _next_unlocked(self) -> int:
        if self._mode == MODE_NATIVE:
            return int(self.source.next_uint32()) & MASK32
        return self._core.next_uint32()

    def fill(self, count: int) -> np.ndarray:
        """Return the next *count* outputs as a uint32 array."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        with self._lock:
            if self._mode == MODE_DETERMINISTIC:
                return self._core.fill(count)
            return np.fromiter((self._next_unlocked() for _ in range(count)), dtype=np.uint32, count=count)

    def randbelow(self, n: int) -> int:
        """Uniform integer in ``[0, n)`` for ``1 <= n <= 2**32``, by rejection."""
        if n <= 0 or n > MASK32 + 1:
            raise ValueError(f"n must be in [1, 2**32], got {n}")
        limit = ((MASK32 + 1) // n) * n
        while True:
            value = self.next_uint32()
            if value < limit:
                return value % n

    def random(self) -> float:
        """Float in ``[0.0, 1.0)`` built from 53 bits of two outputs."""
        high = self.next_uint32() >> 5
        low = self.next_uint32() >> 6
        return (high * 67108864.0 + low) * (1.0 / 9007199254740992.0)


# Global instance
_global_rng = DualModeRNG()


def get_default_rng() -> DualModeRNG:
    return _global_rng


def set_random_seed(seed: int) -> None:
    """0 selects native randomness; anything else a reproducible stream."""
    _global_rng.set_seed(seed)


def next_random_uint32() -> int:
    return _global_rng.next_uint32()
