"""Basic data structures."""

from __future__ import annotations

import operator
from collections import defaultdict
from typing import Dict, List

from .errors import IndexOutOfRangeError, InvalidArgumentError


class DisjointSet:
    """Weighted quick-union over ``0..n-1`` with optional path compression.

    Every element starts as its own component. ``union`` links the root of the
    smaller tree under the root of the larger one, which keeps every tree at
    most ``log2(n)`` deep whatever the order of unions. When
    ``path_compression`` is on, ``find`` additionally re-points every node it
    walks through directly at the root.

    On a tie the root of the second argument goes under the root of the first.
    The universe size is fixed at construction.
    """

    def __init__(self, n: int, path_compression: bool = True) -> None:
        try:
            n = operator.index(n)
        except TypeError:
            raise InvalidArgumentError(f"size must be an integer, got {n!r}") from None
        if n < 0:
            raise InvalidArgumentError("size must be non-negative")
        self._n = n
        self.path_compression = path_compression
        self._parent: List[int] = list(range(n))
        self._size: List[int] = [1] * n
        self._count = n

    @property
    def n(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        return f"DisjointSet(n={self._n}, path_compression={self.path_compression})"

    def __str__(self) -> str:
        return (
            "DisjointSet:\n"
            f"  count: {self._count}\n"
            f"  path compression? {self.path_compression}\n"
            f"  parents: {self._parent}\n"
            f"  sizes: {self._size}"
        )

    def find(self, p: int) -> int:
        """Return the root of the component containing `p`."""

        p = self._validate(p)
        root = p
        parent = self._parent
        while parent[root] != root:
            root = parent[root]
        if self.path_compression:
            while parent[p] != root:
                parent[p], p = root, parent[p]
        return root

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> bool:
        """Merge the components of `p` and `q`.

        Returns False, leaving everything untouched, when they already share a
        component, so callers can use the result for cycle detection.
        """

        p = self._validate(p)
        q = self._validate(q)
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return False
        if self._size[root_p] < self._size[root_q]:
            root_p, root_q = root_q, root_p
        self._parent[root_q] = root_p
        self._size[root_p] += self._size[root_q]
        self._count -= 1
        return True

    def components(self) -> int:
        return self._count

    def component_size(self, p: int) -> int:
        return self._size[self.find(p)]

    def depth(self, p: int) -> int:
        """Number of links between `p` and its root. Never compresses."""

        p = self._validate(p)
        links = 0
        while self._parent[p] != p:
            p = self._parent[p]
            links += 1
        return links

    def groups(self) -> Dict[int, List[int]]:
        """Return each root mapped to the sorted members of its component."""

        final_map: Dict[int, List[int]] = defaultdict(list)
        for index in range(self._n):
            final_map[self.find(index)].append(index)
        return dict(final_map)

    def _validate(self, p: int) -> int:
        try:
            index = operator.index(p)
        except TypeError:
            raise IndexOutOfRangeError(f"index {p!r} is not an integer") from None
        if index < 0 or index >= self._n:
            raise IndexOutOfRangeError(f"index {index} is not between 0 and {self._n - 1}")
        return index


__all__ = ["DisjointSet"]
