"""Command line entry point for the union-find experiments."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .errors import InvalidArgumentError
from .experiments import BenchmarkConfig, CountConfig, WalkConfig
from .runner import run_to_file


def parse_args(argv: list[str]) -> argparse.Namespace:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--quiet", action="store_true", help="Only print errors")
    common.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars",
    )
    common.add_argument("--seed", type=int, default=None, help="Random seed (default: $UF_SEED or fresh entropy)")
    common.add_argument("--output", type=Path, default=None, help="CSV or Excel file for the result table")

    parser = argparse.ArgumentParser(description="Run union-find connectivity and timing experiments.")
    subparsers = parser.add_subparsers(dest="experiment", required=True)

    count_parser = subparsers.add_parser(
        "count", parents=[common], help="Count random pairs until one component remains"
    )
    count_parser.add_argument("--sizes", type=int, nargs="+", default=[], help="Universe sizes to connect")
    count_parser.add_argument(
        "--trials",
        type=int,
        default=20,
        help="Number of random sizes to draw when --sizes is not given (default: 20)",
    )
    count_parser.add_argument("--low", type=int, default=10000, help="Smallest random size (default: 10000)")
    count_parser.add_argument("--high", type=int, default=200000, help="Exclusive upper random size (default: 200000)")

    bench_parser = subparsers.add_parser(
        "benchmark", parents=[common], help="Time unions with and without path compression"
    )
    bench_parser.add_argument("--start", type=int, default=250, help="First universe size (default: 250)")
    bench_parser.add_argument("--stop", type=int, default=16000, help="Sizes double while below this (default: 16000)")
    bench_parser.add_argument("--runs", type=int, default=10, help="Timed runs per size (default: 10)")

    walk_parser = subparsers.add_parser(
        "walk", parents=[common], help="Mean distance of two-dimensional random walks"
    )
    walk_parser.add_argument("--steps", type=int, nargs="+", default=None, help="Step counts to simulate")
    walk_parser.add_argument("--repeats", type=int, default=10, help="Rows per step count (default: 10)")
    walk_parser.add_argument("--experiments", type=int, default=60, help="Walks averaged per row (default: 60)")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> CountConfig | BenchmarkConfig | WalkConfig:
    verbose = not args.quiet
    use_tqdm = False if args.disable_tqdm else None
    if args.experiment == "count":
        return CountConfig(
            sizes=args.sizes,
            trials=args.trials,
            low=args.low,
            high=args.high,
            seed=args.seed,
            use_tqdm=use_tqdm,
            verbose=verbose,
        )
    if args.experiment == "benchmark":
        return BenchmarkConfig(
            start=args.start,
            stop=args.stop,
            runs=args.runs,
            seed=args.seed,
            verbose=verbose,
        )
    walk_kwargs = {} if args.steps is None else {"steps": args.steps}
    return WalkConfig(
        repeats=args.repeats,
        experiments=args.experiments,
        seed=args.seed,
        use_tqdm=use_tqdm,
        verbose=verbose,
        **walk_kwargs,
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])

    try:
        config = build_config(args)
    except InvalidArgumentError as exc:
        print(f"ERROR: {exc}")
        return 2

    result = run_to_file(args.experiment, args.output, config)
    if result is None:
        return 1
    if not config.verbose:
        return 0
    print("\n--- Results Summary ---")
    print(result.to_string(index=False, max_rows=20))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
