"""xoshiro128** core generator.

Adapted from the public-domain reference at https://prng.di.unimi.it/.
The scalar path masks every add, multiply and shift to 32 bits; the lane
path relies on numpy ``uint32`` arrays wrapping on their own.
"""

from __future__ import annotations

import numpy as np

from dualrng.core.seed_expander import expand_seed_into
from dualrng.core.state import STATE_WORDS, GeneratorState
from dualrng.core.wrap32 import MASK32, rotl, u32


def step(state: GeneratorState) -> int:
    """Advance *state* in place by one step and return the 32-bit output."""
    s = state.words
    result = u32(rotl(u32(s[1] * 5), 7) * 9)
    t = u32(s[1] << 9)

    s[2] ^= s[0]
    s[3] ^= s[1]
    s[1] ^= s[2]
    s[0] ^= s[3]

    s[2] ^= t
    s[3] = rotl(s[3], 11)
    return result


def next_state(state: tuple[int, int, int, int]) -> tuple[int, tuple[int, int, int, int]]:
    """Pure form of :func:`step`: ``state -> (output, new_state)``."""
    working = GeneratorState(list(state))
    output = step(working)
    return output, working.as_tuple()


def _rotl_lanes(values: np.ndarray, shift: int) -> np.ndarray:
    return (values << np.uint32(shift)) | (values >> np.uint32(32 - shift))


def step_lanes(states: np.ndarray) -> np.ndarray:
    """Advance an ``(n, 4)`` uint32 array of independent states in place.

    Returns the ``n`` outputs, one per lane.
    """
    if states.dtype != np.uint32 or states.ndim != 2 or states.shape[1] != STATE_WORDS:
        raise ValueError(f"states must be an (n, {STATE_WORDS}) uint32 array")
    s0 = states[:, 0]
    s1 = states[:, 1]
    s2 = states[:, 2]
    s3 = states[:, 3]
    result = _rotl_lanes(s1 * np.uint32(5), 7) * np.uint32(9)
    t = s1 << np.uint32(9)

    s2 ^= s0
    s3 ^= s1
    s1 ^= s2
    s0 ^= s3

    s2 ^= t
    states[:, 3] = _rotl_lanes(s3, 11)
    return result


class Xoshiro128StarStar:
    """Deterministic generator owning a single :class:`GeneratorState`."""

    def __init__(self, seed: int = 1) -> None:
        self.state = GeneratorState()
        self.seed(seed)

    def seed(self, seed: int) -> None:
        expand_seed_into(self.state, seed)

    def next_uint32(self) -> int:
        return step(self.state)

    def fill(self, count: int) -> np.ndarray:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        out = np.empty(count, dtype=np.uint32)
        for index in range(count):
            out[index] = step(self.state)
        return out

    def getstate(self) -> tuple[int, int, int, int]:
        return self.state.as_tuple()

    def setstate(self, words: tuple[int, int, int, int]) -> None:
        if len(words) != STATE_WORDS:
            raise ValueError(f"expected {STATE_WORDS} state words, got {len(words)}")
        self.state.words[:] = [int(word) & MASK32 for word in words]
