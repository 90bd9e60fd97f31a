"""Dual-mode random numbers: native entropy by default, xoshiro128** when seeded."""

from dualrng.config import RNGParams
from dualrng.generator import (
    MODE_DETERMINISTIC,
    MODE_NATIVE,
    DualModeRNG,
    get_default_rng,
    next_random_uint32,
    set_random_seed,
)
from dualrng.core.rng_utils import ensure_rng

__all__ = [
    "DualModeRNG",
    "MODE_DETERMINISTIC",
    "MODE_NATIVE",
    "RNGParams",
    "ensure_rng",
    "get_default_rng",
    "next_random_uint32",
    "set_random_seed",
]
