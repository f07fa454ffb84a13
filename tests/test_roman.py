import pytest

from eulerkit.roman import NUMERALS, characters_saved, solve, to_number, to_numeral


def test_solve_matches_known_total():
    assert solve() == 743


@pytest.mark.parametrize("number", range(1, 5001))
def test_round_trip(number):
    assert to_number(to_numeral(number)) == number


def test_subtractive_example():
    assert to_numeral(4) == "IV"


@pytest.mark.parametrize(
    "additive, subtractive",
    [("IIII", "IV"), ("XIIII", "XIV"), ("DCCCC", "CM"), ("LXXXX", "XC")],
)
def test_additive_and_subtractive_agree(additive, subtractive):
    assert to_number(additive) == to_number(subtractive)


@pytest.mark.parametrize("numeral", ["IIII", "XIIII", "DCCCC", "LXXXX"])
def test_minimal_form_is_shorter(numeral):
    assert len(to_numeral(to_number(numeral))) < len(numeral)


def test_canonical_numerals_save_nothing():
    canonical = [to_numeral(n) for n in range(1, 200)]
    assert characters_saved(canonical) == 0


def test_saved_is_never_negative_per_line():
    assert all(characters_saved([numeral]) >= 0 for numeral in NUMERALS)


def test_lowercase_accepted():
    assert to_number("mcmxc") == to_number("MCMXC")


@pytest.mark.parametrize("bad", ["", "ABC", "XIZ"])
def test_invalid_numerals_raise(bad):
    with pytest.raises(ValueError):
        to_number(bad)


@pytest.mark.parametrize("bad", [0, -3])
def test_non_positive_numbers_raise(bad):
    with pytest.raises(ValueError):
        to_numeral(bad)