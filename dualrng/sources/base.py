from __future__ import annotations

from typing import Protocol, runtime_checkable


class EntropySourceError(RuntimeError):
    """Raised when a native entropy source cannot produce output."""


@runtime_checkable
class EntropySource(Protocol):
    """Platform randomness consulted only while the generator is in native mode."""

    name: str

    def reseed(self) -> None:
        """Reseed from a non-deterministic input (clock, OS entropy, ...)."""
        ...

    def next_uint32(self) -> int:
        """Return the next value in ``[0, 2**32)``."""
        ...
