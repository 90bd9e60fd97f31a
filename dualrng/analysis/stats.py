"""Statistical smoke battery for 32-bit output streams.

This is a quick sanity check, not a substitute for TestU01 or PractRand.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from dualrng.core.seed_expander import expand_seed, expand_seeds
from dualrng.core.xoshiro import step, step_lanes


class StatsDependencyError(RuntimeError):
    """Raised when scipy is not available for the statistical battery."""


def _require_scipy_stats():
    try:
        from scipy import stats  # type: ignore
    except Exception as exc:  # pragma: no cover - dependency gate
        raise StatsDependencyError("scipy is required for the statistical battery. Install scipy.") from exc
    return stats


@dataclass(slots=True)
class StatsReport:
    samples: int
    ones_fraction: float
    monobit_p: float
    chi2_stat: float
    chi2_p: float
    max_bit_bias: float
    bit_bias_limit: float
    alpha: float
    passed: bool


def _as_uint32(values: np.ndarray) -> np.ndarray:
    array = np.ascontiguousarray(np.asarray(values).reshape(-1), dtype=np.uint32)
    if array.size == 0:
        raise ValueError("statistical battery needs at least one sample")
    return array


def bit_position_bias(values: np.ndarray) -> np.ndarray:
    """Per-bit |P(bit=1) - 0.5| for bit positions 0..31."""
    array = _as_uint32(values)
    shifts = np.arange(32, dtype=np.uint32)
    bits = (array[:, None] >> shifts) & np.uint32(1)
    return np.abs(bits.mean(axis=0) - 0.5)


def run_battery(values: np.ndarray, alpha: float = 0.001) -> StatsReport:
    stats = _require_scipy_stats()
    array = _as_uint32(values)
    as_bytes = array.view(np.uint8)

    total_bits = array.size * 32
    ones = int(np.unpackbits(as_bytes).sum())
    z_score = (ones - total_bits / 2.0) / math.sqrt(total_bits / 4.0)
    monobit_p = float(2.0 * stats.norm.sf(abs(z_score)))

    counts = np.bincount(as_bytes, minlength=256)
    chi2 = stats.chisquare(counts)

    bias = bit_position_bias(array)
    # Five standard deviations of a fair coin estimated from `samples` flips.
    bias_limit = 5.0 * 0.5 / math.sqrt(array.size)
    max_bias = float(bias.max())

    passed = monobit_p >= alpha and float(chi2.pvalue) >= alpha and max_bias <= bias_limit
    return StatsReport(
        samples=int(array.size),
        ones_fraction=ones / total_bits,
        monobit_p=monobit_p,
        chi2_stat=float(chi2.statistic),
        chi2_p=float(chi2.pvalue),
        max_bit_bias=max_bias,
        bit_bias_limit=bias_limit,
        alpha=alpha,
        passed=bool(passed),
    )


def first_zero_state(seed: int, steps: int = 1 << 16) -> int | None:
    """Step index at which the state from *seed* becomes all-zero, or None."""
    state = expand_seed(seed)
    if state.is_zero():
        return 0
    for index in range(1, steps + 1):
        step(state)
        if state.is_zero():
            return index
    return None


def zero_state_scan(seeds: np.ndarray, steps: int = 1 << 16) -> np.ndarray:
    """Vectorised fixed-point scan; True marks seeds whose state hit zero."""
    states = expand_seeds(seeds)
    collapsed = ~states.any(axis=1)
    for _ in range(steps):
        step_lanes(states)
        collapsed |= ~states.any(axis=1)
    return collapsed


def first_divergence(seed_a: int, seed_b: int, limit: int = 1024) -> int | None:
    """Index of the first output where two seeds disagree, or None."""
    left = expand_seed(seed_a)
    right = expand_seed(seed_b)
    for index in range(limit):
        if step(left) != step(right):
            return index
    return None


def first_output_collisions(seeds_a: np.ndarray, seeds_b: np.ndarray) -> np.ndarray:
    """True where paired seeds share the same first output."""
    left = expand_seeds(seeds_a)
    right = expand_seeds(seeds_b)
    if left.shape != right.shape:
        raise ValueError("seed arrays must have the same length")
    return step_lanes(left) == step_lanes(right)
