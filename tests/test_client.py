import math

import numpy as np
import pytest

from union_find.client import count, expected_pairs, make_rng, random_pairs
from union_find.errors import InvalidArgumentError


def test_count_merges_exactly_n_minus_one_times():
    result = count(500, np.random.default_rng(7))
    assert result.n == 500
    assert result.unions == 499
    assert result.pairs >= result.unions


def test_count_is_reproducible_for_a_seed():
    assert count(300, 11) == count(300, 11)


def test_count_single_site_needs_no_pairs():
    result = count(1, 0)
    assert result.pairs == 0
    assert result.unions == 0


@pytest.mark.parametrize("n", [0, -4])
def test_count_rejects_empty_universe(n):
    with pytest.raises(InvalidArgumentError):
        count(n)


def test_count_is_close_to_half_n_log_n():
    n = 2000
    ratios = [count(n, seed).pairs / expected_pairs(n) for seed in range(5)]
    assert 0.7 < sum(ratios) / len(ratios) < 1.6


def test_expected_pairs_small_values():
    assert expected_pairs(1) == 0.0
    assert expected_pairs(100) == pytest.approx(50 * math.log(100))


def test_random_pairs_stay_in_range():
    stream = random_pairs(5, make_rng(3), batch_size=8)
    for _ in range(40):
        left, right = next(stream)
        assert 0 <= left < 5
        assert 0 <= right < 5


def test_make_rng_reuses_generator():
    generator = np.random.default_rng(1)
    assert make_rng(generator) is generator
