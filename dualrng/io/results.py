from __future__ import annotations

from pathlib import Path

import numpy as np

from dualrng.config import normalize_output_format


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def format_values(values: np.ndarray, output_format: str = "hex") -> list[str]:
    output_format = normalize_output_format(output_format)
    array = np.asarray(values, dtype=np.uint32).reshape(-1)
    if output_format == "hex":
        return [f"0x{int(value):08X}" for value in array]
    if output_format == "dec":
        return [str(int(value)) for value in array]
    raise ValueError(f"Output format {output_format!r} is binary and has no text form")


def write_outputs(values: np.ndarray, path: Path, output_format: str = "hex") -> Path:
    """Write a uint32 sample as text lines, little-endian raw bytes or ``.npy``."""
    output_format = normalize_output_format(output_format)
    array = np.asarray(values, dtype=np.uint32).reshape(-1)
    ensure_dir(path.parent)
    if output_format == "npy":
        np.save(path, array, allow_pickle=False)
        # np.save appends .npy when missing.
        return path if path.suffix == ".npy" else path.with_name(path.name + ".npy")
    if output_format == "bin":
        path.write_bytes(array.astype("<u4").tobytes())
        return path
    path.write_text("\n".join(format_values(array, output_format)) + "\n", encoding="utf-8")
    return path


def read_outputs(path: Path, output_format: str = "hex") -> np.ndarray:
    output_format = normalize_output_format(output_format)
    if output_format == "npy":
        return np.load(path, allow_pickle=False).astype(np.uint32)
    if output_format == "bin":
        return np.frombuffer(path.read_bytes(), dtype="<u4").astype(np.uint32)
    lines = [line.strip() for line in path.read_text(encoding="utf-8").splitlines() if line.strip()]
    return np.array([int(line, 0) for line in lines], dtype=np.uint32)
