from dualrng.analysis.stats import (
    StatsDependencyError,
    StatsReport,
    first_divergence,
    first_output_collisions,
    first_zero_state,
    run_battery,
    zero_state_scan,
)
from dualrng.analysis.vectors import check_manifest, reference_vectors, write_manifest

__all__ = [
    "StatsDependencyError",
    "StatsReport",
    "check_manifest",
    "first_divergence",
    "first_output_collisions",
    "first_zero_state",
    "reference_vectors",
    "run_battery",
    "write_manifest",
    "zero_state_scan",
]
