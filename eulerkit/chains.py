"""Number chains: square-digit chains and amicable chains."""

from collections import Counter
from functools import lru_cache


def square_digit_sum(n):
    """Sum of the squares of the decimal digits of ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return sum(int(digit) ** 2 for digit in str(n))


@lru_cache(maxsize=None)
def _ends_at_89(n):
    while n not in (1, 89):
        n = square_digit_sum(n)
    return n == 89


def _square_sum_counts(limit):
    """How many integers in [0, limit) have each square digit sum."""
    digits = [int(d) for d in str(limit)]
    free = [Counter({0: 1})]
    for _ in range(len(digits)):
        previous = free[-1]
        layer = Counter()
        for total, count in previous.items():
            for d in range(10):
                layer[total + d * d] += count
        free.append(layer)

    counts = Counter()
    prefix = 0
    for position, digit in enumerate(digits):
        suffix = free[len(digits) - position - 1]
        for d in range(digit):
            base = prefix + d * d
            for total, count in suffix.items():
                counts[base + total] += count
        prefix += digit * digit
    return counts


def count_arriving_at_89(limit):
    """How many starting numbers in [1, limit) reach 89 by repeated square digit sums."""
    if limit <= 1:
        return 0
    counts = _square_sum_counts(limit)
    return sum(count for total, count in counts.items() if total > 0 and _ends_at_89(total))


def proper_divisor_sums(limit):
    """List whose entry ``n`` is the sum of the proper divisors of n, for 0..limit."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    sums = [0] * (limit + 1)
    for divisor in range(1, limit // 2 + 1):
        for multiple in range(2 * divisor, limit + 1, divisor):
            sums[multiple] += divisor
    return sums


def longest_amicable_chain_minimum(limit):
    """Smallest member of the longest amicable chain whose elements stay within ``limit``.

    Ties keep the chain found first when scanning starting numbers upwards.
    """
    sums = proper_divisor_sums(limit)
    visited = set()
    best_length = 0
    best_minimum = None
    for start in range(1, limit + 1):
        if start in visited:
            continue
        path = {start: 0}
        order = [start]
        visited.add(start)
        current = start
        while True:
            following = sums[current]
            if following in path:
                cycle = order[path[following]:]
                if len(cycle) > best_length:
                    best_length = len(cycle)
                    best_minimum = min(cycle)
                break
            if following == 0 or following > limit or following in visited:
                break
            path[following] = len(order)
            order.append(following)
            visited.add(following)
            current = following
    if best_minimum is None:
        raise ValueError(f"no amicable chain lies within {limit}")
    return best_minimum