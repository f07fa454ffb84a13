from math import prod

import pytest

from eulerkit.products import factorizations, minimal_product_sum_total


def test_factorizations_of_twelve():
    assert list(factorizations(12)) == [(12,), (3, 4), (2, 6), (2, 2, 3)]


def test_prime_has_only_trivial_factorization():
    assert list(factorizations(13)) == [(13,)]


@pytest.mark.parametrize("n", range(2, 120))
def test_factorizations_are_sorted_products_without_repeats(n):
    found = list(factorizations(n))
    assert found[0] == (n,)
    assert len(set(found)) == len(found)
    for factors in found:
        assert prod(factors) == n
        assert list(factors) == sorted(factors)
        assert all(f >= 2 for f in factors)


@pytest.mark.parametrize("n", [1, 0, -4])
def test_factorizations_rejects_small(n):
    with pytest.raises(ValueError):
        factorizations(n)


def test_minimal_product_sum_small():
    assert minimal_product_sum_total(6) == 30


def test_minimal_product_sum_k_two():
    assert minimal_product_sum_total(2) == 4


def test_minimal_product_sum_full():
    assert minimal_product_sum_total(12000) == 7587457


def test_minimal_product_sum_rejects_small():
    with pytest.raises(ValueError):
        minimal_product_sum_total(1)