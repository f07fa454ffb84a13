import pytest

from eulerkit.geometry import count_right_triangles


def test_unit_grid():
    assert count_right_triangles(1) == 3


def test_worked_example_two_by_two():
    assert count_right_triangles(2) == 14


def test_fifty_by_fifty():
    assert count_right_triangles(50) == 14234


def test_empty_grid_has_no_triangles():
    assert count_right_triangles(0) == count_right_triangles(0) * 2


def test_count_grows_with_grid():
    counts = [count_right_triangles(size) for size in range(0, 15)]
    assert all(a < b for a, b in zip(counts, counts[1:]))


def test_count_at_least_axis_triangles():
    for size in range(1, 12):
        assert count_right_triangles(size) >= size * size


def test_count_bounded_by_point_pairs():
    for size in range(1, 12):
        points = (size + 1) ** 2 - 1
        assert count_right_triangles(size) <= points * (points - 1) // 2


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        count_right_triangles(-1)