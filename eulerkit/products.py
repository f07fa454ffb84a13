"""Multiplicative partitions and minimal product-sum numbers."""

from math import isqrt


def _factorizations(n, smallest):
    yield (n,)
    for factor in range(isqrt(n), smallest - 1, -1):
        if n % factor == 0:
            for tail in _factorizations(n // factor, factor):
                yield (factor, *tail)


def factorizations(n):
    """Every way to write ``n`` as a product of factors >= 2, each in ascending order.

    The trivial factorization ``(n,)`` comes first; after it, factorizations
    with a larger smallest factor come before those with a smaller one.
    """
    if n < 2:
        raise ValueError("n must be at least 2")
    return _factorizations(n, 2)


def minimal_product_sum_total(max_k):
    """Sum of the distinct minimal product-sum numbers for set sizes 2..``max_k``.

    A factorization of n with sum s and m factors, padded with n - s ones,
    is a set of k = n - s + m numbers whose sum and product are both n.
    """
    if max_k < 2:
        raise ValueError("max_k must be at least 2")
    covered = set()
    total = 0
    n = 4
    while len(covered) != max_k - 1:
        found = False
        for factors in factorizations(n):
            factor_sum = sum(factors)
            if factor_sum > n:
                continue
            size = n - factor_sum + len(factors)
            if size > max_k or size < 2 or size in covered:
                continue
            covered.add(size)
            found = True
        if found:
            total += n
        n += 1
    return total