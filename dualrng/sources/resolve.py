from __future__ import annotations

from dataclasses import dataclass

from dualrng.sources.base import EntropySource
from dualrng.sources.native import ClockSeededSource, MersenneSource, OSEntropySource

_SOURCE_FACTORIES = {
    "os": OSEntropySource,
    "mersenne": MersenneSource,
    "clock": ClockSeededSource,
}
SOURCE_NAMES = ("auto", *_SOURCE_FACTORIES)


@dataclass(slots=True)
class SourceInfo:
    name: str
    deterministic_fallback: bool
    reason: str


def normalize_source_name(raw: object) -> str:
    name = str(raw).strip().lower()
    if name not in SOURCE_NAMES:
        raise ValueError(f"Unknown entropy source {raw!r}; expected one of {', '.join(SOURCE_NAMES)}")
    return name


def describe_source(name: str) -> SourceInfo:
    normalized = normalize_source_name(name)
    if normalized == "clock":
        return SourceInfo(name="clock", deterministic_fallback=True, reason="requested by name")
    if normalized != "auto":
        return SourceInfo(name=normalized, deterministic_fallback=False, reason="requested by name")

    try:
        OSEntropySource().next_uint32()
    except Exception as exc:
        return SourceInfo(name="mersenne", deterministic_fallback=False, reason=f"os entropy unavailable: {exc}")
    return SourceInfo(name="os", deterministic_fallback=False, reason="os entropy available")


def resolve_source(name: str = "auto") -> EntropySource:
    """Instantiate the native source for *name*; ``auto`` prefers OS entropy."""
    info = describe_source(name)
    return _SOURCE_FACTORIES[info.name]()
