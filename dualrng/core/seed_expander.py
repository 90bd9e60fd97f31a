"""SplitMix32 seed expansion.

One 32-bit seed becomes the four state words of the core generator. This is
a one-shot mix run once per reseed, not a generator of its own.
"""

from __future__ import annotations

import numpy as np

from dualrng.core.state import STATE_WORDS, GeneratorState
from dualrng.core.wrap32 import MASK32, u32

GOLDEN_GAMMA = 0x9E3779B9
MIX_MULT_1 = 0x85EBCA6B
MIX_MULT_2 = 0xC2B2AE35


def _mix(value: int) -> int:
    value ^= value >> 15
    value = u32(value * MIX_MULT_1)
    value ^= value >> 13
    value = u32(value * MIX_MULT_2)
    value ^= value >> 16
    return value


def expand_seed(seed: int) -> GeneratorState:
    accumulator = u32(seed)
    words = []
    for _ in range(STATE_WORDS):
        accumulator = u32(accumulator + GOLDEN_GAMMA)
        words.append(_mix(accumulator))
    return GeneratorState(words)


def expand_seed_into(state: GeneratorState, seed: int) -> None:
    """Reset *state* in place from *seed*."""
    state.words[:] = expand_seed(seed).words


def expand_seeds(seeds: np.ndarray) -> np.ndarray:
    """Vectorised :func:`expand_seed`; returns an ``(n, 4)`` uint32 array."""
    accumulator = np.bitwise_and(np.asarray(seeds, dtype=np.int64).reshape(-1), MASK32).astype(np.uint32)
    out = np.zeros((accumulator.shape[0], STATE_WORDS), dtype=np.uint32)
    gamma = np.uint32(GOLDEN_GAMMA)
    for slot in range(STATE_WORDS):
        accumulator = accumulator + gamma
        value = accumulator.copy()
        value ^= value >> np.uint32(15)
        value *= np.uint32(MIX_MULT_1)
        value ^= value >> np.uint32(13)
        value *= np.uint32(MIX_MULT_2)
        value ^= value >> np.uint32(16)
        out[:, slot] = value
    return out
