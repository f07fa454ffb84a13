"""Minimal path sums through a matrix, moving in all four directions."""

import heapq

from eulerkit.path_matrix_bottom import BOTTOM_ROWS
from eulerkit.path_matrix_top import TOP_ROWS


def _validated(matrix):
    rows = [tuple(row) for row in matrix]
    if not rows or not rows[0]:
        raise ValueError("matrix must have at least one row and one column")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("matrix rows must all have the same length")
    return rows


def minimal_path_sum(matrix):
    """Smallest sum of cells on a path from the top-left to the bottom-right cell.

    The path may step up, down, left and right; both end cells are counted.
    """
    rows = _validated(matrix)
    height, width = len(rows), len(rows[0])
    target = (height - 1, width - 1)

    best = {(0, 0): rows[0][0]}
    queue = [(rows[0][0], 0, 0)]
    while queue:
        cost, i, j = heapq.heappop(queue)
        if (i, j) == target:
            return cost
        if cost > best[(i, j)]:
            continue
        for ni, nj in ((i + 1, j), (i - 1, j), (i, j + 1), (i, j - 1)):
            if 0 <= ni < height and 0 <= nj < width:
                candidate = cost + rows[ni][nj]
                if candidate < best.get((ni, nj), candidate + 1):
                    best[(ni, nj)] = candidate
                    heapq.heappush(queue, (candidate, ni, nj))
    raise AssertionError("target cell is always reachable")


def solve():
    """Minimal four-way path sum through the bundled 80x80 matrix."""
    return minimal_path_sum(TOP_ROWS + BOTTOM_ROWS)