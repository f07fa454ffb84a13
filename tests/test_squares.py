import pytest

from eulerkit.squares import (
    almost_equilateral_perimeter_sum,
    closest_rectangle_area,
    cuboid_route_threshold,
    is_square,
)


@pytest.mark.parametrize("value", [4, 16384, 100, 36, 100000000000000])
def test_is_square_accepts_squares(value):
    assert is_square(value) is True


@pytest.mark.parametrize("value", [5, 99, 63, 65, 2, 6])
def test_is_square_rejects_non_squares(value):
    assert is_square(value) is False


def test_is_square_rejects_negative_numbers():
    assert is_square(-4) is False


def test_is_square_on_consecutive_squares():
    for root in range(1, 200):
        assert is_square(root * root)
        assert not is_square(root * root + 1)


def test_closest_rectangle_area_worked_example():
    # A 3 by 2 grid holds exactly 18 rectangles.
    assert closest_rectangle_area(18) == 6


def test_closest_rectangle_area_two_million():
    assert closest_rectangle_area(2000000) == 2772


def test_closest_rectangle_area_rejects_non_positive():
    with pytest.raises(ValueError):
        closest_rectangle_area(0)


def test_cuboid_route_threshold_small():
    assert cuboid_route_threshold(2000) == 100


def test_cuboid_route_threshold_is_monotonic():
    results = [cuboid_route_threshold(limit) for limit in (10, 100, 500, 1000)]
    assert results == sorted(results)


def test_cuboid_route_threshold_one_million():
    assert cuboid_route_threshold(1000000) == 1818


def test_almost_equilateral_perimeter_sum_billion():
    assert almost_equilateral_perimeter_sum(1000000000) == 518408346


def test_almost_equilateral_perimeter_sum_is_monotonic():
    limits = [10, 100, 1000, 10**4, 10**6, 10**9]
    sums = [almost_equilateral_perimeter_sum(limit) for limit in limits]
    assert sums == sorted(sums)


def test_almost_equilateral_perimeter_sum_steps_only_at_candidates():
    # n = 17 is the second solution; it enters once 3n - 1 = 50 is below the limit.
    assert almost_equilateral_perimeter_sum(15) == almost_equilateral_perimeter_sum(50)
    assert almost_equilateral_perimeter_sum(51) > almost_equilateral_perimeter_sum(50)