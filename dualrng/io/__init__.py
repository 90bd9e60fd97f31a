"""Output file helpers for generated samples."""

from dualrng.io.results import ensure_dir, format_values, read_outputs, write_outputs

__all__ = ["ensure_dir", "format_values", "read_outputs", "write_outputs"]
