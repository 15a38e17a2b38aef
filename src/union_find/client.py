"""Randomized connectivity client for :class:DisjointSet."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .errors import InvalidArgumentError
from .structures import DisjointSet

RandomSource = np.random.Generator | int | None

_BATCH_SIZE = 4096


@dataclass
class ConnectionResult:
    """Outcome of a single :func:count run."""

    n: int
    pairs: int
    unions: int


def make_rng(rng: RandomSource = None) -> np.random.Generator:
    """Return `rng` if it is already a generator, otherwise seed a new one."""

    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def random_pairs(n: int, rng: np.random.Generator, batch_size: int = _BATCH_SIZE):
    """Yield an endless stream of index pairs drawn uniformly from ``[0, n)``."""

    while True:
        batch = rng.integers(0, n, size=(batch_size, 2))
        for left, right in batch.tolist():
            yield left, right


def count(n: int, rng: RandomSource = None) -> ConnectionResult:
    """Connect random pairs among `n` sites until a single component remains.

    Every drawn pair is counted, including the ones that were already
    connected. The number of successful unions is always ``n - 1``.
    """

    if n < 1:
        raise InvalidArgumentError(f"need at least one site, got {n}")

    generator = make_rng(rng)
    clusters = DisjointSet(n, path_compression=True)
    pairs = 0
    unions = 0
    if clusters.components() == 1:
        return ConnectionResult(n=n, pairs=pairs, unions=unions)

    for left, right in random_pairs(n, generator):
        pairs += 1
        if not clusters.connected(left, right):
            clusters.union(left, right)
            unions += 1
            if clusters.components() == 1:
                break
    return ConnectionResult(n=n, pairs=pairs, unions=unions)


def expected_pairs(n: int) -> float:
    """Reference value ``n ln(n) / 2`` for the number of pairs :func:count draws."""

    if n < 2:
        return 0.0
    return 0.5 * n * math.log(n)


__all__ = [
    "ConnectionResult",
    "RandomSource",
    "count",
    "expected_pairs",
    "make_rng",
    "random_pairs",
]
