"""Convenience helpers for running an experiment end-to-end."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from .errors import UnionFindError
from .experiments import (
    BenchmarkConfig,
    CountConfig,
    WalkConfig,
    run_benchmark_experiment,
    run_count_experiment,
    run_walk_experiment,
)

ExperimentConfig = CountConfig | BenchmarkConfig | WalkConfig

_EXPERIMENTS = {
    "count": (CountConfig, run_count_experiment),
    "benchmark": (BenchmarkConfig, run_benchmark_experiment),
    "walk": (WalkConfig, run_walk_experiment),
}


def run_to_file(
    kind: str,
    output_path: str | Path | None = None,
    config: ExperimentConfig | None = None,
) -> pd.DataFrame | None:
    """Run the `kind` experiment and write its table to `output_path` when given."""

    if kind not in _EXPERIMENTS:
        print(f"ERROR: Unknown experiment '{kind}'. Choose one of: {', '.join(sorted(_EXPERIMENTS))}.")
        return None
    config_type, experiment = _EXPERIMENTS[kind]
    if config is not None and not isinstance(config, config_type):
        print(f"ERROR: Experiment '{kind}' expects a {config_type.__name__}, got {type(config).__name__}.")
        return None

    if output_path is not None:
        output_path = Path(output_path)
        if output_path.suffix.lower() not in {".csv", ".xlsx"}:
            print(f"ERROR: Unsupported output file format for '{output_path}'. Please use a CSV or Excel path.")
            return None

    try:
        dataframe = experiment(config)
    except UnionFindError as exc:
        print(f"ERROR: {exc}")
        return None

    if output_path is not None:
        try:
            save_dataframe(dataframe, output_path)
        except OSError as exc:
            print(f"ERROR: Could not write results to '{output_path}': {exc}")
            return None
        if config is None or config.verbose:
            print(f"\n   Processing complete. Results saved to '{output_path}'")
    return dataframe


def save_dataframe(dataframe: pd.DataFrame, output_path: str | Path) -> None:
    path = Path(output_path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        dataframe.to_csv(path, index=False)
        return
    if suffix == ".xlsx":
        dataframe.to_excel(path, index=False)
        return
    raise ValueError(f"Unsupported output file format: '{suffix}'")


__all__ = ["run_to_file", "save_dataframe"]
