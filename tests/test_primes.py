import pytest

from eulerkit.primes import (
    count_prime_power_triples,
    first_composite_primorial_plus_one,
    is_prime,
    primes_up_to,
)


def test_small_sieve():
    assert primes_up_to(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


@pytest.mark.parametrize("limit", [-5, 0, 1])
def test_sieve_below_two_is_empty(limit):
    assert primes_up_to(limit) == []


def test_sieve_includes_limit_when_prime():
    assert primes_up_to(29)[-1] == 29


def test_sieve_agrees_with_is_prime():
    assert primes_up_to(10000) == [n for n in range(10001) if is_prime(n)]


def test_is_prime_large():
    assert is_prime(100000007)


@pytest.mark.parametrize("n", [-7, 0, 1, 4, 30031])
def test_is_prime_rejects(n):
    assert not is_prime(n)


def test_first_composite_primorial_plus_one():
    assert first_composite_primorial_plus_one() == 30031


def test_prime_power_triples_small():
    assert count_prime_power_triples(50) == 4
    assert count_prime_power_triples(29) == 1


def test_prime_power_triples_nothing_below_smallest():
    assert count_prime_power_triples(28) == 0


def test_prime_power_triples_monotone():
    assert count_prime_power_triples(1000) <= count_prime_power_triples(5000)


def test_prime_power_triples_full():
    assert count_prime_power_triples(50_000_000) == 1097343