"""Error types raised by the union-find library."""

from __future__ import annotations


class UnionFindError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(UnionFindError, ValueError):
    """Raised when a size or experiment parameter is out of its domain."""


class IndexOutOfRangeError(UnionFindError, IndexError):
    """Raised when an element index lies outside ``[0, n)``."""


__all__ = [
    "UnionFindError",
    "InvalidArgumentError",
    "IndexOutOfRangeError",
]
