from __future__ import annotations

from collections.abc import Iterable

from dualrng.core.wrap32 import MASK32
from dualrng.sources.base import EntropySourceError


class SequenceSource:
    """Replays a fixed list of values; substitutes a native source in tests.

    ``reseed()`` rewinds to the start and is counted in :attr:`reseed_count`.
    """

    name = "sequence"

    def __init__(self, values: Iterable[int], cycle: bool = True) -> None:
        self.values = [int(value) & MASK32 for value in values]
        if not self.values:
            raise ValueError("SequenceSource needs at least one value")
        self.cycle = cycle
        self.position = 0
        self.reseed_count = 0

    def reseed(self) -> None:
        self.reseed_count += 1
        self.position = 0

    def next_uint32(self) -> int:
        if self.position >= len(self.values):
            if not self.cycle:
                raise EntropySourceError("SequenceSource exhausted")
            self.position = 0
        value = self.values[self.position]
        self.position += 1
        return value
