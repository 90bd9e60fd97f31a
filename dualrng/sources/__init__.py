"""Native entropy sources for the generator's native mode."""

from dualrng.sources.base import EntropySource, EntropySourceError
from dualrng.sources.fixed import SequenceSource
from dualrng.sources.native import ClockSeededSource, MersenneSource, OSEntropySource
from dualrng.sources.resolve import SOURCE_NAMES, SourceInfo, describe_source, normalize_source_name, resolve_source

__all__ = [
    "ClockSeededSource",
    "EntropySource",
    "EntropySourceError",
    "MersenneSource",
    "OSEntropySource",
    "SOURCE_NAMES",
    "SequenceSource",
    "SourceInfo",
    "describe_source",
    "normalize_source_name",
    "resolve_source",
]
