from __future__ import annotations

import math

import numpy as np


def powf(base: float, exponent: float, safer: bool = True) -> np.float32:
    """Single-precision ``base ** exponent``.

    With *safer* the IEEE special cases are enforced even where the platform
    ``powf`` gets them wrong: ``powf(1, y) == 1`` (y NaN included),
    ``powf(x, +-0) == 1`` and ``powf(-1, +-inf) == 1``.
    """
    x = np.float32(base)
    y = np.float32(exponent)
    if safer:
        if x == np.float32(1.0):
            return np.float32(1.0)
        if y == np.float32(0.0):
            return np.float32(1.0)
        if x == np.float32(-1.0) and math.isinf(float(y)):
            return np.float32(1.0)
    with np.errstate(all="ignore"):
        return np.float32(np.power(x, y, dtype=np.float32))
