from math import comb

from eulerkit.dice import count_cube_arrangements


def test_count_cube_arrangements():
    assert count_cube_arrangements() == 1217


def test_count_within_possible_pairs():
    assert 0 < count_cube_arrangements() <= comb(10, 6) ** 2 // 2