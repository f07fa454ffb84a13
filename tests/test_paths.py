import pytest

from eulerkit.paths import minimal_path_sum, solve

EXAMPLE = [
    [131, 673, 234, 103, 18],
    [201, 96, 342, 965, 150],
    [630, 803, 746, 422, 111],
    [537, 699, 497, 121, 956],
    [805, 732, 524, 37, 331],
]


def test_solve_matches_known_answer():
    assert solve() == 425185


def test_worked_example():
    assert minimal_path_sum(EXAMPLE) == 2297


def test_single_cell():
    assert minimal_path_sum([[42]]) == 42


def test_single_row_takes_every_cell():
    row = [3, 1, 4, 1, 5, 9, 2, 6]
    assert minimal_path_sum([row]) == sum(row)


def test_single_column_takes_every_cell():
    column = [[7], [2], [8], [1]]
    assert minimal_path_sum(column) == sum(v[0] for v in column)


def test_transpose_gives_same_result():
    transposed = [list(col) for col in zip(*EXAMPLE)]
    assert minimal_path_sum(transposed) == minimal_path_sum(EXAMPLE)


def test_reversed_path_gives_same_result():
    flipped = [list(reversed(row)) for row in reversed(EXAMPLE)]
    assert minimal_path_sum(flipped) == minimal_path_sum(EXAMPLE)


def test_not_worse_than_border_path():
    border = sum(EXAMPLE[0]) + sum(row[-1] for row in EXAMPLE[1:])
    assert minimal_path_sum(EXAMPLE) <= border


def test_detour_upwards_is_used():
    matrix = [
        [1, 1, 1],
        [9, 9, 1],
        [1, 1, 1],
        [1, 9, 9],
        [1, 1, 1],
    ]
    # The cheap route snakes right, left and right again through the ones.
    assert minimal_path_sum(matrix) == sum(row.count(1) for row in matrix)


def test_tuples_accepted():
    assert minimal_path_sum(tuple(tuple(r) for r in EXAMPLE)) == minimal_path_sum(EXAMPLE)


@pytest.mark.parametrize("matrix", [[], [[]]])
def test_empty_matrix_rejected(matrix):
    with pytest.raises(ValueError):
        minimal_path_sum(matrix)


def test_ragged_matrix_rejected():
    with pytest.raises(ValueError):
        minimal_path_sum([[1, 2], [3]])