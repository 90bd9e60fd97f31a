from __future__ import annotations

from dataclasses import dataclass, field

from dualrng.core.wrap32 import MASK32

STATE_WORDS = 4


@dataclass(slots=True)
class GeneratorState:
    """Four 32-bit words of xoshiro128** state, mutated in place."""

    words: list[int] = field(default_factory=lambda: [0] * STATE_WORDS)

    def __post_init__(self) -> None:
        if len(self.words) != STATE_WORDS:
            raise ValueError(f"GeneratorState needs {STATE_WORDS} words, got {len(self.words)}")
        self.words = [int(word) & MASK32 for word in self.words]

    def is_zero(self) -> bool:
        return not any(self.words)

    def as_tuple(self) -> tuple[int, int, int, int]:
        return tuple(self.words)  # type: ignore[return-value]

    def copy(self) -> "GeneratorState":
        return GeneratorState(list(self.words))
