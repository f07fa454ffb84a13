"""Targets reachable by combining digits with the four arithmetic operations."""

from fractions import Fraction
from functools import lru_cache
from itertools import combinations

_ZERO = Fraction(0)


def _apply_all(left, right):
    yield left * right
    yield _ZERO if right == 0 else left / right
    yield left + right
    yield left - right


def reachable_targets(digits):
    """Every value made from all of ``digits``, each used once, with + - * / and brackets.

    Division by zero gives zero. Values are exact fractions.
    """
    values = tuple(Fraction(d) for d in digits)
    if not values:
        raise ValueError("at least one digit is needed")
    full = (1 << len(values)) - 1

    @lru_cache(maxsize=None)
    def results(mask):
        members = [i for i in range(len(values)) if mask >> i & 1]
        if len(members) == 1:
            return frozenset({values[members[0]]})
        found = set()
        sub = (mask - 1) & mask
        while sub:
            rest = mask ^ sub
            for left in results(sub):
                for right in results(rest):
                    found.update(_apply_all(left, right))
            sub = (sub - 1) & mask
        return frozenset(found)

    return results(full)


def consecutive_run(digits):
    """Largest n such that every integer 1..n is a reachable target."""
    targets = reachable_targets(digits)
    n = 0
    while n + 1 in targets:
        n += 1
    return n


def best_digit_set():
    """The four distinct digits a < b < c < d giving the longest run 1..n.

    Candidate sets are scanned in the same order as a lexicographic walk of
    a ten-bit selection mask; the first longest run wins.
    """
    best = None
    best_run = -1
    for digits in reversed(list(combinations(range(10), 4))):
        run = consecutive_run(digits)
        if run > best_run:
            best, best_run = digits, run
    return best