from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

_OUTPUT_FORMATS = ("hex", "dec", "bin", "npy")


def normalize_output_format(raw: object) -> str:
    output_format = str(raw).strip().lower()
    if output_format not in _OUTPUT_FORMATS:
        raise ValueError(f"Unknown output format {raw!r}; expected one of {', '.join(_OUTPUT_FORMATS)}")
    return output_format


@dataclass(slots=True)
class RNGParams:
    seed: int | None = None
    source: str = "auto"
    count: int = 16
    output_format: str = "hex"
    output_path: Path | None = None
    stats_samples: int = 65536
    alpha: float = 0.001
    extra: dict = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, mapping: dict) -> "RNGParams":
        params = cls()
        if "seed" in mapping and mapping["seed"] is not None:
            params.seed = int(mapping["seed"])
        params.source = str(mapping.get("source", params.source)).strip().lower()
        params.count = int(mapping.get("count", params.count))
        params.output_format = normalize_output_format(
            mapping.get("outputFormat", mapping.get("output_format", params.output_format))
        )
        raw_path = mapping.get("outputPath", mapping.get("output_path"))
        if raw_path:
            params.output_path = Path(raw_path)
        params.stats_samples = int(mapping.get("statsSamples", mapping.get("stats_samples", params.stats_samples)))
        params.alpha = float(mapping.get("alpha", params.alpha))
        if params.count < 0:
            raise ValueError(f"count must be non-negative, got {params.count}")
        if params.stats_samples <= 0:
            raise ValueError(f"stats samples must be positive, got {params.stats_samples}")
        params.extra = dict(mapping)
        return params
