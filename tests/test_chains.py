import pytest

from eulerkit.chains import (
    count_arriving_at_89,
    longest_amicable_chain_minimum,
    proper_divisor_sums,
    square_digit_sum,
)


def test_count_below_ten_million():
    assert count_arriving_at_89(10000000) == 8581146


def test_count_below_ten():
    assert count_arriving_at_89(10) == 7


@pytest.mark.parametrize("limit", [0, 1])
def test_count_empty_ranges(limit):
    assert count_arriving_at_89(limit) == 0


@pytest.mark.parametrize("limit", [5, 37, 89, 100, 648, 999, 1234])
def test_count_grows_by_at_most_one(limit):
    step = count_arriving_at_89(limit + 1) - count_arriving_at_89(limit)
    assert step in (0, 1)


def test_count_never_exceeds_range():
    assert 0 <= count_arriving_at_89(500) <= 499


def test_eighty_nine_itself_counts():
    assert count_arriving_at_89(90) - count_arriving_at_89(89) == 1


@pytest.mark.parametrize("n", [12, 345, 9081, 1000007])
def test_square_digit_sum_ignores_digit_order(n):
    assert square_digit_sum(n) == square_digit_sum(int(str(n)[::-1]))


def test_square_digit_sum_ignores_zeros():
    assert square_digit_sum(1010) == square_digit_sum(11)


def test_square_digit_sum_rejects_negative():
    with pytest.raises(ValueError):
        square_digit_sum(-1)


def test_divisor_sums_of_primes_are_one():
    sums = proper_divisor_sums(100)
    for p in (2, 3, 5, 7, 11, 13, 97):
        assert sums[p] == 1


def test_divisor_sums_small_entries():
    sums = proper_divisor_sums(10)
    assert len(sums) == 11
    assert sums[0] == 0
    assert sums[1] == 0


def test_amicable_pair_sums():
    sums = proper_divisor_sums(300)
    assert sums[220] == 284
    assert sums[284] == 220


def test_divisor_sums_reject_negative():
    with pytest.raises(ValueError):
        proper_divisor_sums(-1)


def test_longest_chain_below_a_million():
    assert longest_amicable_chain_minimum(1000000) == 14316


def test_longest_chain_prefers_amicable_pair():
    assert longest_amicable_chain_minimum(300) == 220


def test_no_chain_raises():
    with pytest.raises(ValueError):
        longest_amicable_chain_minimum(5)