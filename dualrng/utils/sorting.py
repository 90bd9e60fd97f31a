from __future__ import annotations

from functools import cmp_to_key
from typing import Callable

RecordCompare = Callable[[bytes, bytes], int]


def sort_records(buffer: bytearray | memoryview, count: int, size: int, compare: RecordCompare) -> None:
    """Sort *count* fixed-size records at the start of *buffer* in place.

    *compare* follows the ``qsort`` contract: negative, zero or positive.
    Bytes past ``count * size`` are left untouched.
    """
    if count < 0 or size <= 0:
        raise ValueError(f"invalid record layout: count={count}, size={size}")
    span = count * size
    if span > len(buffer):
        raise ValueError(f"{count} records of {size} bytes exceed a {len(buffer)}-byte buffer")
    if count < 2:
        return
    records = [bytes(buffer[offset : offset + size]) for offset in range(0, span, size)]
    records.sort(key=cmp_to_key(compare))
    buffer[:span] = b"".join(records)
