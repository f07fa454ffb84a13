import pytest

from eulerkit.sudoku import PUZZLES, Grid, solve, solve_all


def _givens_kept(puzzle, grid):
    return all(
        given == "0" or int(given) == value
        for puzzle_row, grid_row in zip(puzzle, grid.rows)
        for given, value in zip(puzzle_row, grid_row)
    )


def test_first_puzzle_solves_to_valid_grid():
    grid = Grid(PUZZLES[0])
    assert grid.solve() is True
    assert grid.is_valid()
    assert _givens_kept(PUZZLES[0], grid)


def test_first_puzzle_top_left_number():
    grid = Grid(PUZZLES[0])
    grid.solve()
    assert grid.top_left_number() == 483


def test_unsolved_grid_is_not_valid():
    assert Grid(PUZZLES[1]).is_valid() is False


def test_top_left_number_requires_filled_cells():
    with pytest.raises(ValueError):
        Grid(PUZZLES[0]).top_left_number()


def test_blanked_cell_is_restored():
    grid = Grid(PUZZLES[2])
    grid.solve()
    solved_rows = grid.rows
    holed = [list(row) for row in solved_rows]
    holed[4][4] = 0
    holed[0][0] = 0
    again = Grid(holed)
    assert again.solve()
    assert again.rows == solved_rows


def test_solving_solved_grid_changes_nothing():
    grid = Grid(PUZZLES[3])
    grid.solve()
    copy = Grid(grid.rows)
    assert copy.solve()
    assert copy == grid


def test_conflicting_givens_fail_and_leave_grid():
    rows = ["110000000"] + ["000000000"] * 8
    grid = Grid(rows)
    before = grid.rows
    assert grid.solve() is False
    assert grid.rows == before


def test_solve_all_raises_on_impossible_puzzle():
    bad = ["110000000"] + ["000000000"] * 8
    with pytest.raises(ValueError):
        solve_all([PUZZLES[0], bad])


def test_solve_all_keeps_order_and_givens():
    grids = solve_all(PUZZLES[:5])
    assert len(grids) == 5
    for puzzle, grid in zip(PUZZLES[:5], grids):
        assert grid.is_valid()
        assert _givens_kept(puzzle, grid)


def test_wrong_shape_rejected():
    with pytest.raises(ValueError):
        Grid(["000000000"] * 8)
    with pytest.raises(ValueError):
        Grid(["00000000"] + ["000000000"] * 8)


def test_out_of_range_value_rejected():
    rows = [[0] * 9 for _ in range(9)]
    rows[0][0] = 10
    with pytest.raises(ValueError):
        Grid(rows)


def test_bundled_total():
    assert solve() == 24702