"""Experiments built on the union-find structure and its collaborators."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

import numpy as np
import pandas as pd
from tqdm import tqdm

from .benchmark import BenchmarkTimer, union_find_workload
from .client import count, expected_pairs, make_rng
from .errors import InvalidArgumentError
from .random_walk import random_walk_multi

_DEFAULT_STEPS = (2, 3, 6, 10, 15, 21, 28, 36, 45, 55, 66, 78, 91, 105, 120)


def _seed_from_env(seed: int | None) -> int | None:
    if seed is not None:
        return seed
    raw = os.getenv("UF_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgumentError(f"UF_SEED must be an integer, got {raw!r}") from None


@dataclass
class CountConfig:
    """Configuration for the random connection count experiment."""

    sizes: Sequence[int] = ()
    trials: int = 20
    low: int = 10000
    high: int = 200000
    seed: int | None = None
    use_tqdm: bool | None = None
    verbose: bool = True

    def __post_init__(self) -> None:
        self.seed = _seed_from_env(self.seed)
        self.sizes = tuple(self.sizes)
        if any(size < 1 for size in self.sizes):
            raise InvalidArgumentError("every size must be at least 1")
        if not self.sizes:
            if self.trials < 1:
                raise InvalidArgumentError("trials must be positive")
            if not 1 <= self.low < self.high:
                raise InvalidArgumentError("need 1 <= low < high")


@dataclass
class BenchmarkConfig:
    """Configuration for timing the structure with and without path compression."""

    start: int = 250
    stop: int = 16000
    runs: int = 10
    seed: int | None = None
    verbose: bool = True

    def __post_init__(self) -> None:
        self.seed = _seed_from_env(self.seed)
        if self.start < 1:
            raise InvalidArgumentError("start must be positive")
        if self.stop <= self.start:
            raise InvalidArgumentError("stop must be greater than start")
        if self.runs < 1:
            raise InvalidArgumentError("runs must be positive")

    def sizes(self) -> List[int]:
        sizes = []
        n = self.start
        while n < self.stop:
            sizes.append(n)
            n *= 2
        return sizes


@dataclass
class WalkConfig:
    """Configuration for the random walk distance experiment."""

    steps: Sequence[int] = _DEFAULT_STEPS
    repeats: int = 10
    experiments: int = 60
    seed: int | None = None
    use_tqdm: bool | None = None
    verbose: bool = True

    def __post_init__(self) -> None:
        self.seed = _seed_from_env(self.seed)
        self.steps = tuple(self.steps)
        if any(step < 0 for step in self.steps):
            raise InvalidArgumentError("step counts must be non-negative")
        if self.repeats < 1 or self.experiments < 1:
            raise InvalidArgumentError("repeats and experiments must be positive")


def _use_tqdm(config: CountConfig | WalkConfig) -> bool:
    if not config.verbose:
        return False
    return config.use_tqdm is not False


def _progress(iterable: Iterable, use_tqdm: bool, total: int, desc: str, unit: str) -> Iterable:
    if not use_tqdm or total == 0:
        return iterable
    return tqdm(iterable, total=total, desc=desc, unit=unit)


def run_count_experiment(config: CountConfig | None = None) -> pd.DataFrame:
    """Count the random pairs needed to connect each configured universe."""

    config = config or CountConfig()
    rng = make_rng(config.seed)
    sizes = list(config.sizes) or rng.integers(config.low, config.high, size=config.trials).tolist()

    overall_start_time = time.time()
    if config.verbose:
        print(f"--- Connection count for {len(sizes)} universes ---")

    rows: List[Tuple[int, int, int, float, float]] = []
    for n in _progress(sizes, _use_tqdm(config), len(sizes), "   Connecting", "run"):
        result = count(n, rng)
        expected = expected_pairs(n)
        ratio = result.pairs / expected if expected else float("nan")
        rows.append((result.n, result.pairs, result.unions, expected, ratio))
        if config.verbose:
            print(f"   Number of Objects: {n}  && Number of Pairs: {result.pairs}")

    if config.verbose:
        print(f"   Done in {time.time() - overall_start_time:.2f}s")
    return pd.DataFrame(rows, columns=["n", "pairs", "unions", "expected", "ratio"])


def run_benchmark_experiment(config: BenchmarkConfig | None = None) -> pd.DataFrame:
    """Time the connectivity loop for doubling sizes, with and without compression."""

    config = config or BenchmarkConfig()
    rng = make_rng(config.seed)

    overall_start_time = time.time()
    rows: List[Tuple[int, float, float]] = []
    for n in config.sizes():
        timings = []
        for compression in (True, False):
            supplier, run = union_find_workload(n, path_compression=compression, rng=rng)
            label = "compressed" if compression else "uncompressed"
            timer = BenchmarkTimer(f"union-find {label} n={n}", run, verbose=config.verbose)
            timings.append(timer.run_from_supplier(supplier, config.runs))
        rows.append((n, timings[0], timings[1]))
        if config.verbose:
            print(f"   N-Value : {n} compressed {timings[0]:.3f}ms uncompressed {timings[1]:.3f}ms")

    if config.verbose:
        print(f"   Done in {time.time() - overall_start_time:.2f}s")
    return pd.DataFrame(rows, columns=["n", "compressed_ms", "uncompressed_ms"])


def run_walk_experiment(config: WalkConfig | None = None) -> pd.DataFrame:
    """Measure the mean walk distance for every configured step count."""

    config = config or WalkConfig()
    rng = make_rng(config.seed)
    plan = [step for step in config.steps for _ in range(config.repeats)]

    overall_start_time = time.time()
    rows: List[Tuple[int, float]] = []
    for step in _progress(plan, _use_tqdm(config), len(plan), "   Walking", "run"):
        rows.append((step, random_walk_multi(step, config.experiments, rng)))

    if config.verbose:
        distances = pd.DataFrame(rows, columns=["Steps", "Distance"]).groupby("Steps")["Distance"].mean()
        for step, mean_distance in distances.items():
            print(f"   {step},{mean_distance:.4f} (sqrt: {np.sqrt(step):.4f})")
        print(f"   Done in {time.time() - overall_start_time:.2f}s")
    return pd.DataFrame(rows, columns=["Steps", "Distance"])


__all__ = [
    "BenchmarkConfig",
    "CountConfig",
    "WalkConfig",
    "run_benchmark_experiment",
    "run_count_experiment",
    "run_walk_experiment",
]
