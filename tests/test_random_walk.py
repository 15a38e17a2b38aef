import pytest

from union_find.errors import InvalidArgumentError
from union_find.random_walk import RandomWalk, random_walk_multi


def test_move_updates_position():
    walk = RandomWalk(0)
    walk.move(3, -4)
    assert (walk.x, walk.y) == (3, -4)
    assert walk.distance() == pytest.approx(5.0)


def test_zero_steps_stays_at_origin():
    walk = RandomWalk(1)
    walk.random_walk(0)
    assert walk.distance() == 0.0


@pytest.mark.parametrize("steps", [1, 2, 17, 40])
def test_walk_respects_step_budget_and_parity(steps):
    walk = RandomWalk(steps)
    walk.random_walk(steps)
    manhattan = abs(walk.x) + abs(walk.y)
    assert manhattan <= steps
    assert manhattan % 2 == steps % 2
    assert walk.distance() <= steps


def test_single_move_is_unit_length():
    walk = RandomWalk(9)
    walk.random_move()
    assert walk.distance() == 1.0


def test_negative_steps_rejected():
    with pytest.raises(InvalidArgumentError):
        RandomWalk().random_walk(-1)


def test_multi_walk_mean_grows_like_square_root():
    mean = random_walk_multi(100, 400, 2)
    assert 6.0 < mean < 12.0


def test_multi_walk_needs_experiments():
    with pytest.raises(InvalidArgumentError):
        random_walk_multi(10, 0)
