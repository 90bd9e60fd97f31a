"""Unsigned 32-bit wraparound helpers for the scalar code path."""

from __future__ import annotations

MASK32 = 0xFFFFFFFF


def u32(value: int) -> int:
    return value & MASK32


def rotl(value: int, shift: int) -> int:
    """Rotate a 32-bit value left by *shift* bits (0 < shift < 32)."""
    value &= MASK32
    return ((value << shift) | (value >> (32 - shift))) & MASK32
