from fractions import Fraction

import pytest

from eulerkit.expressions import best_digit_set, consecutive_run, reachable_targets


def test_single_digit():
    assert reachable_targets((7,)) == {Fraction(7)}
    assert consecutive_run((7,)) == 0


def test_order_of_digits_does_not_matter():
    assert reachable_targets((4, 3, 2, 1)) == reachable_targets((1, 2, 3, 4))


def test_division_by_zero_gives_zero():
    assert Fraction(0) in reachable_targets((5, 0))


def test_pair_targets():
    assert reachable_targets((1, 2)) == {
        Fraction(3), Fraction(-1), Fraction(1), Fraction(2), Fraction(1, 2)
    }


def test_run_for_one_to_four():
    assert consecutive_run((1, 2, 3, 4)) == 28


def test_run_values_are_all_reachable():
    digits = (1, 2, 5, 8)
    targets = reachable_targets(digits)
    run = consecutive_run(digits)
    assert all(n in targets for n in range(1, run + 1))
    assert run + 1 not in targets


def test_best_digit_set():
    assert best_digit_set() == (1, 2, 5, 8)


def test_empty_digits_rejected():
    with pytest.raises(ValueError):
        reachable_targets(())