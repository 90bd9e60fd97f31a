"""Utility functions: filesystem and host helpers."""

from dualrng.utils.floatmath import powf
from dualrng.utils.fs import sha256_file
from dualrng.utils.sorting import sort_records

__all__ = ["powf", "sha256_file", "sort_records"]
