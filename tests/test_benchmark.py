import pytest

from union_find.benchmark import BenchmarkTimer, get_warmup_runs, union_find_workload
from union_find.errors import InvalidArgumentError


@pytest.mark.parametrize(
    ("runs", "warmups"),
    [(1, 2), (29, 2), (30, 3), (55, 5), (100, 10), (1000, 10)],
)
def test_get_warmup_runs(runs, warmups):
    assert get_warmup_runs(runs) == warmups


def test_hooks_run_for_warmup_and_timed_runs():
    calls = {"supplier": 0, "pre": 0, "run": 0, "post": 0}

    def supplier():
        calls["supplier"] += 1
        return [3, 1, 2]

    def pre(values):
        calls["pre"] += 1
        return list(values)

    def run(values):
        calls["run"] += 1
        values.sort()

    def post(values):
        calls["post"] += 1
        assert values == [1, 2, 3]

    timer = BenchmarkTimer("sort", run, pre=pre, post=post)
    mean = timer.run_from_supplier(supplier, 20)

    assert mean >= 0.0
    assert calls["supplier"] == 22
    assert calls["pre"] == 22
    assert calls["run"] == 22
    assert calls["post"] == 20


def test_run_with_constant_value():
    seen = []
    timer = BenchmarkTimer("append", seen.append)
    timer.run(5, 3)
    assert seen == [5] * 5


def test_zero_runs_rejected():
    timer = BenchmarkTimer("noop", lambda value: None)
    with pytest.raises(InvalidArgumentError):
        timer.run_from_supplier(lambda: None, 0)


@pytest.mark.parametrize("path_compression", [True, False])
def test_union_find_workload_produces_fresh_structures(path_compression):
    supplier, run = union_find_workload(64, path_compression=path_compression, rng=5)
    first = supplier()
    second = supplier()
    assert first[0] is not second[0]
    assert first[0].path_compression is path_compression
    assert first[1].shape == (128, 2)
    remaining = run(first)
    assert 1 <= remaining < 64


def test_union_find_workload_rejects_empty_universe():
    with pytest.raises(InvalidArgumentError):
        union_find_workload(0)


def test_verbose_timer_announces_run(capsys):
    timer = BenchmarkTimer("noisy", lambda value: None, verbose=True)
    timer.run(None, 2)
    assert "Begin run: noisy with 2 runs" in capsys.readouterr().out
