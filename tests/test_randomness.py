import pytest

from mobagen.randomness import random_range


def test_equal_bounds_return_start():
    assert random_range(7, 7) == 7
    assert random_range(2.5, 2.5) == 2.5


def test_int_range_stays_inside_bounds():
    values = {random_range(-3, 3) for _ in range(500)}
    assert values <= set(range(-3, 4))
    assert all(isinstance(v, int) for v in values)


def test_int_range_is_inclusive_on_both_ends():
    values = {random_range(0, 1) for _ in range(300)}
    assert values == {0, 1}


def test_float_range_stays_inside_bounds():
    for _ in range(300):
        value = random_range(-1.5, 4.0)
        assert -1.5 <= value <= 4.0
        assert isinstance(value, float)


def test_reversed_int_range_raises():
    with pytest.raises(ValueError):
        random_range(5, 1)