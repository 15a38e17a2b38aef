"""Timed repetition of a unit of work, with warmup runs."""

from __future__ import annotations

import time
from typing import Any, Callable, Optional, Tuple

import numpy as np

from .client import RandomSource, make_rng
from .errors import InvalidArgumentError
from .structures import DisjointSet


def get_warmup_runs(m: int) -> int:
    """Return the number of warmup runs for `m` timed runs: at least 2, at most 10."""

    return max(2, min(10, m // 10))


class BenchmarkTimer:
    """Measure the mean running time of `run` in milliseconds.

    Each repetition takes a fresh value from the supplier, passes it through
    `pre` (if any), times `run` on it and finally hands it to `post` (if any).
    Only `run` is on the clock.
    """

    def __init__(
        self,
        description: str,
        run: Callable[[Any], Any],
        pre: Optional[Callable[[Any], Any]] = None,
        post: Optional[Callable[[Any], Any]] = None,
        verbose: bool = False,
    ) -> None:
        self.description = description
        self.run_fn = run
        self.pre = pre
        self.post = post
        self.verbose = verbose

    def run_from_supplier(self, supplier: Callable[[], Any], m: int) -> float:
        if m < 1:
            raise InvalidArgumentError(f"number of runs must be positive, got {m}")
        if self.verbose:
            print(f"   Begin run: {self.description} with {m:,} runs")
        self._repeat(get_warmup_runs(m), supplier, post=None)
        return self._repeat(m, supplier, post=self.post)

    def run(self, value: Any, m: int) -> float:
        return self.run_from_supplier(lambda: value, m)

    def _repeat(
        self,
        m: int,
        supplier: Callable[[], Any],
        post: Optional[Callable[[Any], Any]],
    ) -> float:
        elapsed = 0.0
        for _ in range(m):
            value = supplier()
            if self.pre is not None:
                value = self.pre(value)
            t0 = time.perf_counter()
            self.run_fn(value)
            elapsed += time.perf_counter() - t0
            if post is not None:
                post(value)
        return elapsed * 1000.0 / m


def union_find_workload(
    n: int,
    path_compression: bool = True,
    rng: RandomSource = None,
) -> Tuple[Callable[[], Tuple[DisjointSet, np.ndarray]], Callable[[Tuple[DisjointSet, np.ndarray]], int]]:
    """Build a supplier/run pair that times the connectivity loop on `n` sites.

    The supplier draws ``2 * n`` random pairs up front, so random number
    generation stays off the clock.
    """

    if n < 1:
        raise InvalidArgumentError(f"need at least one site, got {n}")
    generator = make_rng(rng)

    def supplier() -> Tuple[DisjointSet, np.ndarray]:
        pairs = generator.integers(0, n, size=(2 * n, 2))
        return DisjointSet(n, path_compression=path_compression), pairs

    def run(state: Tuple[DisjointSet, np.ndarray]) -> int:
        clusters, pairs = state
        for left, right in pairs.tolist():
            if not clusters.connected(left, right):
                clusters.union(left, right)
        return clusters.components()

    return supplier, run


__all__ = ["BenchmarkTimer", "get_warmup_runs", "union_find_workload"]
