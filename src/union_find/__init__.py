"""Union-find library initialization."""

from .structures import DisjointSet
from .errors import IndexOutOfRangeError, InvalidArgumentError, UnionFindError
from .client import ConnectionResult, count, expected_pairs
from .benchmark import BenchmarkTimer, get_warmup_runs, union_find_workload
from .random_walk import RandomWalk, random_walk_multi
from .experiments import BenchmarkConfig, CountConfig, WalkConfig
from .runner import run_to_file, save_dataframe

__all__ = [
    "DisjointSet",
    "UnionFindError",
    "InvalidArgumentError",
    "IndexOutOfRangeError",
    "ConnectionResult",
    "count",
    "expected_pairs",
    "BenchmarkTimer",
    "get_warmup_runs",
    "union_find_workload",
    "RandomWalk",
    "random_walk_multi",
    "BenchmarkConfig",
    "CountConfig",
    "WalkConfig",
    "run_to_file",
    "save_dataframe",
]
