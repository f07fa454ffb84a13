"""Problems that reduce to recognising perfect squares."""

from math import isqrt


def is_square(n):
    """Return True when the integer ``n`` is a perfect square."""
    if n < 0:
        return False
    root = isqrt(n)
    return root * root == n


def _triangle(n):
    return n * (n + 1) // 2


def closest_rectangle_area(target):
    """Area of the grid whose count of contained rectangles is nearest ``target``.

    An ``a`` by ``b`` grid contains T(a) * T(b) rectangles, T being the
    triangular numbers. The search walks one side down from the largest
    useful width while the other walks up, keeping the first closest pair.
    """
    if target < 1:
        raise ValueError("target must be a positive integer")
    width = 1
    while _triangle(width) < target:
        width += 1

    longer, shorter = width, 1
    closest = _triangle(width) - target
    area = width
    while longer >= shorter:
        distance = _triangle(longer) * _triangle(shorter) - target
        if abs(distance) < closest:
            closest = abs(distance)
            area = longer * shorter
        if distance > 0:
            longer -= 1
        else:
            shorter += 1
    return area


def cuboid_route_threshold(limit):
    """Smallest M for which at least ``limit`` cuboids up to M x M x M have an integer shortest route.

    Each cuboid is counted once, with its longest side equal to M and the
    two shorter sides combined into a sum that is at most 2M - 1.
    """
    count = 0
    longest = 1
    while count < limit:
        longest += 1
        for pair_sum in range(2, 2 * longest):
            if is_square(longest * longest + pair_sum * pair_sum):
                if pair_sum > longest:
                    count += (2 * longest - pair_sum) // 2 + 1
                else:
                    count += pair_sum // 2
    return longest


def almost_equilateral_perimeter_sum(limit):
    """Sum of perimeters of triangles with sides (n, n, n +/- 1) and integral area.

    Only n >= 3 with 3n - 1 below ``limit`` are taken, as in the direct scan
    over n. The candidates are exactly the solutions of x^2 - 3y^2 = 4 with
    x = 3n -/+ 1, which are walked in increasing order.
    """
    total = 0
    x, y = 2, 0
    while True:
        x, y = 2 * x + 3 * y, x + 2 * y
        if x % 3 == 2:
            side = (x + 1) // 3
            perimeter = 3 * side + 1
        else:
            side = (x - 1) // 3
            perimeter = 3 * side - 1
        if side < 3:
            continue
        if 3 * side - 1 >= limit:
            return total
        total += perimeter