from __future__ import annotations

import argparse
import json
from pathlib import Path

from dualrng.analysis.plots import plot_output_histogram
from dualrng.analysis.stats import run_battery
from dualrng.analysis.vectors import DEFAULT_SEEDS, check_manifest, reference_vectors, write_manifest
from dualrng.config import RNGParams, normalize_output_format
from dualrng.generator import DualModeRNG
from dualrng.io.results import format_values, write_outputs
from dualrng.sources.resolve import SOURCE_NAMES, describe_source, normalize_source_name, resolve_source
from dualrng.utils.fs import sha256_file


def _parse_int(raw: str) -> int:
    return int(raw, 0)


def _parse_seeds(raw: str) -> tuple[int, ...]:
    if not raw:
        return ()
    return tuple(_parse_int(item.strip()) for item in raw.split(",") if item.strip())


def _load_protocol(path: Path) -> dict:
    try:
        import yaml  # type: ignore
    except Exception as exc:  # pragma: no cover
        raise RuntimeError("PyYAML is required to load protocol files. Install pyyaml.") from exc
    payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValueError(f"Protocol file must contain a mapping: {path}")
    return payload


def _build_params(args: argparse.Namespace) -> RNGParams:
    if getattr(args, "protocol", ""):
        params = RNGParams.from_mapping(_load_protocol(Path(args.protocol).resolve()))
    else:
        params = RNGParams()
    # Flags left at None keep the protocol (or dataclass) value.
    if getattr(args, "seed", None) is not None:
        params.seed = args.seed
    if getattr(args, "source", None) is not None:
        params.source = args.source
    if getattr(args, "count", None) is not None:
        params.count = args.count
    if getattr(args, "format", None) is not None:
        params.output_format = args.format
    if getattr(args, "output", None):
        params.output_path = Path(args.output)
    if getattr(args, "samples", None) is not None:
        params.stats_samples = args.samples
    if getattr(args, "alpha", None) is not None:
        params.alpha = args.alpha
    params.source = normalize_source_name(params.source)
    params.output_format = normalize_output_format(params.output_format)
    if params.count < 0:
        raise ValueError(f"count must be non-negative, got {params.count}")
    if params.stats_samples <= 0:
        raise ValueError(f"stats samples must be positive, got {params.stats_samples}")
    return params


def _make_rng(params: RNGParams) -> DualModeRNG:
    return DualModeRNG(source=resolve_source(params.source), seed=params.seed)


def _run_generate(params: RNGParams) -> None:
    rng = _make_rng(params)
    values = rng.fill(params.count)
    if params.output_path is not None:
        path = write_outputs(values, params.output_path.resolve(), params.output_format)
        print(f"output={path}")
        print(f"sha256={sha256_file(path)}")
        return
    if params.output_format in {"bin", "npy"}:
        raise ValueError(f"--format {params.output_format} needs --output")
    for line in format_values(values, params.output_format):
        print(line)


def _run_stats(params: RNGParams, plot_path: str) -> bool:
    rng = _make_rng(params)
    values = rng.fill(params.stats_samples)
    report = run_battery(values, alpha=params.alpha)
    print(f"mode={rng.mode}")
    print(f"samples={report.samples}")
    print(f"ones_fraction={report.ones_fraction:.6f}")
    print(f"monobit_p={report.monobit_p:.6f}")
    print(f"chi2={report.chi2_stat:.3f} chi2_p={report.chi2_p:.6f}")
    print(f"max_bit_bias={report.max_bit_bias:.6f} limit={report.bit_bias_limit:.6f}")
    print(f"passed={report.passed}")
    if plot_path:
        title = f"seed={params.seed}" if rng.deterministic else f"native source={rng.source.name}"
        print(f"plot={plot_output_histogram(values, Path(plot_path).resolve(), title=title)}")
    return report.passed


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Dual-mode xoshiro128** random number CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser("generate")
    generate_parser.add_argument("--seed", default=None, type=_parse_int, help="0 or omitted selects native mode")
    generate_parser.add_argument("--count", default=None, type=int)
    generate_parser.add_argument("--source", choices=SOURCE_NAMES, default=None, type=str)
    generate_parser.add_argument("--format", choices=("hex", "dec", "bin", "npy"), default=None, type=str)
    generate_parser.add_argument("--output", default="", type=str)
    generate_parser.add_argument("--protocol", default="", type=str, help="YAML config path")

    stats_parser = subparsers.add_parser("stats")
    stats_parser.add_argument("--seed", default=None, type=_parse_int)
    stats_parser.add_argument("--samples", default=None, type=int)
    stats_parser.add_argument("--source", choices=SOURCE_NAMES, default=None, type=str)
    stats_parser.add_argument("--alpha", default=None, type=float)
    stats_parser.add_argument("--plot", default="", type=str, help="Write a histogram PNG to this path")
    stats_parser.add_argument("--protocol", default="", type=str)

    vectors_parser = subparsers.add_parser("vectors")
    vectors_parser.add_argument("--seeds", default="", type=str, help="Comma-separated seeds, e.g. 1,0x3039")
    vectors_parser.add_argument("--count", default=5, type=int)
    vectors_parser.add_argument("--write", default="", type=str, help="Write a JSON manifest")
    vectors_parser.add_argument("--check", default="", type=str, help="Verify a JSON manifest")

    subparsers.add_parser("sources")

    args = parser.parse_args(argv)

    if args.command == "generate":
        try:
            params = _build_params(args)
            _run_generate(params)
        except ValueError as exc:
            parser.error(str(exc))
        return
    if args.command == "stats":
        try:
            params = _build_params(args)
        except ValueError as exc:
            parser.error(str(exc))
        if not _run_stats(params, args.plot):
            raise SystemExit(1)
        return
    if args.command == "vectors":
        if args.check:
            result = check_manifest(Path(args.check).resolve())
            print(json.dumps(result, indent=2))
            if result["missing"] or result["mismatched"]:
                raise SystemExit(1)
            return
        seeds = _parse_seeds(args.seeds) or DEFAULT_SEEDS
        if 0 in seeds:
            parser.error("seed 0 selects native mode and has no reference vector")
        if args.write:
            print(write_manifest(Path(args.write).resolve(), seeds, args.count))
            return
        for entry in reference_vectors(seeds, args.count):
            print(f"seed={entry.seed} state={' '.join(entry.state)} outputs={' '.join(entry.outputs)}")
        return
    if args.command == "sources":
        for name in SOURCE_NAMES:
            info = describe_source(name)
            print(f"{name:10s} -> {info.name:10s} deterministic_fallback={info.deterministic_fallback} ({info.reason})")
        return


if __name__ == "__main__":
    main()
