import pytest

from eulerkit.exponents import (
    PAIRS,
    largest_exponential_line,
    last_digits_of_prime,
    solve,
)


def test_largest_line_prefers_bigger_power():
    # 2**11 = 2048 is smaller than 3**7 = 2187
    assert largest_exponential_line([(2, 11), (3, 7)]) == 2
    assert largest_exponential_line([(3, 7), (2, 11)]) == 1


def test_largest_line_single_pair():
    assert largest_exponential_line([(10, 1)]) == 1


def test_largest_line_first_wins_on_identical_pairs():
    assert largest_exponential_line([(5, 3), (5, 3), (2, 2)]) == 1


def test_largest_line_accepts_generator():
    assert largest_exponential_line(p for p in [(2, 1), (2, 5), (2, 3)]) == 2


def test_largest_line_empty_raises():
    with pytest.raises(ValueError):
        largest_exponential_line([])


def test_largest_line_rejects_non_positive_base():
    with pytest.raises(ValueError):
        largest_exponential_line([(2, 3), (0, 5)])


def test_bundled_pairs_give_known_line():
    assert len(PAIRS) == 1000
    assert largest_exponential_line(PAIRS) == 709


def test_last_digits_small_example():
    # 3 * 2**2 + 1 = 13
    assert last_digits_of_prime(3, 2, 1) == 3
    assert last_digits_of_prime(3, 2, 5) == 13


def test_last_digits_consistent_across_widths():
    wide = last_digits_of_prime(28433, 7830457, 10)
    for digits in range(1, 10):
        assert last_digits_of_prime(28433, 7830457, digits) == wide % 10 ** digits


def test_last_digits_result_is_within_modulus():
    assert 0 <= last_digits_of_prime(28433, 7830457, 4) < 10 ** 4


def test_last_digits_zero_exponent():
    assert last_digits_of_prime(7, 0, 3) == 8


def test_last_digits_invalid_arguments():
    with pytest.raises(ValueError):
        last_digits_of_prime(1, 5, 0)
    with pytest.raises(ValueError):
        last_digits_of_prime(1, -1, 3)


def test_solve():
    assert solve() == (709, 8739992577)