"""Shared helper for functions that take an optional generator.

Callers accept ``rng: DualModeRNG | None``; ``ensure_rng`` normalizes that
argument so a bare call still honours ``set_random_seed(...)``.
"""
from __future__ import annotations

from dualrng.generator import DualModeRNG, get_default_rng


def ensure_rng(rng: DualModeRNG | None = None) -> DualModeRNG:
    """Return *rng* if given, else the process-wide default generator."""
    if rng is not None:
        return rng
    return get_default_rng()
