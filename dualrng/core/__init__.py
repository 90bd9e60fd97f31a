from dualrng.core.seed_expander import expand_seed, expand_seeds
from dualrng.core.state import GeneratorState
from dualrng.core.wrap32 import MASK32, rotl, u32
from dualrng.core.xoshiro import Xoshiro128StarStar, next_state, step, step_lanes

__all__ = [
    "GeneratorState",
    "MASK32",
    "Xoshiro128StarStar",
    "expand_seed",
    "expand_seeds",
    "next_state",
    "rotl",
    "step",
    "step_lanes",
    "u32",
]
