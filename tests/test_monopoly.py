import pytest

from eulerkit.monopoly import BOARD_SIZE, GO_TO_JAIL, JAIL, most_visited, simulate, solve


def test_counts_cover_every_roll():
    counts = simulate(5000, seed=3)
    assert len(counts) == BOARD_SIZE
    assert sum(counts) == 5000


def test_go_to_jail_square_is_never_an_end_position():
    counts = simulate(20000, seed=11)
    assert counts[GO_TO_JAIL] == 0


def test_same_seed_gives_same_counts():
    first = simulate(3000, seed=42)
    second = simulate(3000, seed=42)
    assert sum(first) == 3000
    assert first[GO_TO_JAIL] == 0
    assert first == second


def test_zero_rolls():
    assert simulate(0, seed=1) == [0] * BOARD_SIZE


def test_jail_is_most_visited():
    counts = simulate(200_000, seed=7)
    assert most_visited(counts, 1) == (JAIL,)


def test_solve_starts_with_jail():
    result = solve(200_000, seed=5)
    assert result.startswith(str(JAIL))
    assert len(result) >= 3


def test_most_visited_orders_and_breaks_ties_by_index():
    assert most_visited([5, 9, 9, 1, 7], 3) == (1, 2, 4)


def test_most_visited_zero():
    assert most_visited([1, 2, 3], 0) == ()


@pytest.mark.parametrize("kwargs", [{"rolls": -1}, {"rolls": 10, "sides": 0}])
def test_invalid_arguments(kwargs):
    with pytest.raises(ValueError):
        simulate(**kwargs)


def test_negative_n_rejected():
    with pytest.raises(ValueError):
        most_visited([1, 2], -1)