"""Two-dimensional lattice random walk."""

from __future__ import annotations

import math

from .client import RandomSource, make_rng
from .errors import InvalidArgumentError


class RandomWalk:
    """A walker starting at the origin and moving one unit per step."""

    def __init__(self, rng: RandomSource = None) -> None:
        self.x = 0
        self.y = 0
        self.rng = make_rng(rng)

    def move(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy

    def random_move(self) -> None:
        """Move by one of (+-1, 0) or (0, +-1), each with equal probability."""

        north_south, positive = self.rng.integers(0, 2, size=2).tolist()
        step = 1 if positive else -1
        if north_south:
            self.move(0, step)
        else:
            self.move(step, 0)

    def random_walk(self, m: int) -> None:
        if m < 0:
            raise InvalidArgumentError(f"number of steps must be non-negative, got {m}")
        for _ in range(m):
            self.random_move()

    def distance(self) -> float:
        """Euclidean distance from the origin to the current position."""

        return math.hypot(self.x, self.y)


def random_walk_multi(m: int, n: int, rng: RandomSource = None) -> float:
    """Return the mean distance reached by `n` independent walks of `m` steps."""

    if n < 1:
        raise InvalidArgumentError(f"number of experiments must be positive, got {n}")
    generator = make_rng(rng)
    total_distance = 0.0
    for _ in range(n):
        walk = RandomWalk(generator)
        walk.random_walk(m)
        total_distance += walk.distance()
    return total_distance / n


__all__ = ["RandomWalk", "random_walk_multi"]
