"""Pairs of cubes that can display every two-digit square below one hundred."""

from itertools import combinations

_SQUARES = ((0, 1), (0, 4), (0, 9), (1, 6), (2, 5), (3, 6), (4, 9), (6, 4), (8, 1))


def _faces(digits):
    faces = set(digits)
    if faces & {6, 9}:
        faces |= {6, 9}
    return frozenset(faces)


def _shows_all(first, second):
    return all(
        (a in first and b in second) or (a in second and b in first) for a, b in _SQUARES
    )


def count_cube_arrangements():
    """Distinct pairs of six-faced digit cubes that can show 01, 04, ..., 81.

    A 6 may be turned over to show a 9 and the other way round.
    """
    cubes = [_faces(choice) for choice in combinations(range(10), 6)]
    ordered = sum(1 for first in cubes for second in cubes if _shows_all(first, second))
    return ordered // 2