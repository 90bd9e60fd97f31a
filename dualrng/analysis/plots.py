from __future__ import annotations

from pathlib import Path

import numpy as np

from dualrng.io.results import ensure_dir


class PlotDependencyError(RuntimeError):
    """Raised when matplotlib is not available for plotting."""


def _require_matplotlib():
    try:
        import matplotlib

        matplotlib.use("Agg")
        import matplotlib.pyplot as plt  # type: ignore
    except Exception as exc:  # pragma: no cover - optional dependency
        raise PlotDependencyError("matplotlib is required for plotting") from exc
    return plt


def plot_output_histogram(values: np.ndarray, out_path: Path, title: str = "") -> Path:
    """Byte-value histogram and per-bit balance of a uint32 sample."""
    plt = _require_matplotlib()
    array = np.ascontiguousarray(np.asarray(values).reshape(-1), dtype=np.uint32)
    counts = np.bincount(array.view(np.uint8), minlength=256)
    shifts = np.arange(32, dtype=np.uint32)
    bit_means = ((array[:, None] >> shifts) & np.uint32(1)).mean(axis=0) if array.size else np.zeros(32)

    figure, (byte_axis, bit_axis) = plt.subplots(1, 2, figsize=(11, 4))
    byte_axis.bar(np.arange(256), counts, width=1.0, color="#4c72b0")
    byte_axis.axhline(array.size * 4 / 256.0, color="#c44e52", linewidth=1.0)
    byte_axis.set_xlabel("byte value")
    byte_axis.set_ylabel("count")
    bit_axis.bar(np.arange(32), bit_means, color="#55a868")
    bit_axis.axhline(0.5, color="#c44e52", linewidth=1.0)
    bit_axis.set_ylim(0.45, 0.55)
    bit_axis.set_xlabel("bit position")
    bit_axis.set_ylabel("P(bit = 1)")
    if title:
        figure.suptitle(title)
    figure.tight_layout()

    out_path = Path(out_path)
    ensure_dir(out_path.parent)
    figure.savefig(out_path, dpi=150)
    plt.close(figure)
    return out_path
