"""Prime sieving, primality testing and two prime-based searches."""

from itertools import count
from math import isqrt

_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def primes_up_to(limit):
    """All primes p with p <= ``limit``, in increasing order."""
    if limit < 2:
        return []
    sieve = bytearray([1]) * (limit + 1)
    sieve[0] = sieve[1] = 0
    for p in range(2, isqrt(limit) + 1):
        if sieve[p]:
            sieve[p * p :: p] = bytes(len(range(p * p, limit + 1, p)))
    return [n for n, flag in enumerate(sieve) if flag]


def is_prime(n):
    """Miller-Rabin test; deterministic for every n below 3.3 * 10**24."""
    if n < 2:
        return False
    for p in _WITNESSES:
        if n % p == 0:
            return n == p
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in _WITNESSES:
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


def count_prime_power_triples(limit):
    """How many distinct numbers below ``limit`` equal p**2 + q**3 + r**4 for primes p, q, r."""
    primes = primes_up_to(isqrt(max(limit, 0)) + 1)
    squares = [p * p for p in primes]
    cubes = [p ** 3 for p in primes]
    fourths = [p ** 4 for p in primes]
    seen = set()
    for square in squares:
        if square >= limit:
            break
        after_square = limit - square
        for cube in cubes:
            if cube >= after_square:
                break
            after_cube = after_square - cube
            for fourth in fourths:
                if fourth >= after_cube:
                    break
                seen.add(square + cube + fourth)
    return len(seen)


def _primes():
    yield 2
    for n in count(3, 2):
        if is_prime(n):
            yield n


def first_composite_primorial_plus_one():
    """The first number of the form 2 * 3 * 5 * ... * p + 1 that is not prime."""
    product = 1
    for p in _primes():
        product *= p
        if not is_prime(product + 1):
            return product + 1
    raise AssertionError("the prime sequence is infinite")