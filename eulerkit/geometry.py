"""Counting right triangles on an integer grid."""

from math import gcd


def _steps(x, y, dx, dy, size):
    """Number of positive multiples of (dx, dy) that keep (x, y) inside the grid."""
    bounds = []
    for start, delta in ((x, dx), (y, dy)):
        if delta > 0:
            bounds.append((size - start) // delta)
        elif delta < 0:
            bounds.append(start // -delta)
    return min(bounds) if bounds else 0


def count_right_triangles(size):
    """Count right triangles OPQ with O at the origin and P, Q in [0, size]^2.

    Triangles with the right angle at O have P and Q on the two axes. Every
    other triangle has its right angle at exactly one of P or Q, so it is
    counted once by stepping from that vertex along the lattice direction
    perpendicular to its line to the origin.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    total = size * size
    for x in range(size + 1):
        for y in range(size + 1):
            if x == 0 and y == 0:
                continue
            g = gcd(x, y)
            dx, dy = y // g, x // g
            total += _steps(x, y, dx, -dy, size)
            total += _steps(x, y, -dx, dy, size)
    return total