import copy

import pytest

from dsakit.matrices import (
    is_diagonally_dominant,
    is_magic_square,
    is_markov,
    max_path_sum,
)

PATH_MATRIX = [
    [10, 10, 2, 0, 20, 4],
    [1, 0, 0, 30, 2, 5],
    [0, 10, 4, 0, 2, 0],
    [1, 0, 2, 20, 0, 4],
]


def test_sample_is_diagonally_dominant():
    assert is_diagonally_dominant([[3, -2, 1], [1, -3, 2], [-1, 2, 4]]) is True


def test_not_diagonally_dominant():
    assert is_diagonally_dominant([[1, 2], [3, 4]]) is False


def test_diagonal_dominance_needs_square():
    with pytest.raises(ValueError):
        is_diagonally_dominant([[1, 2, 3], [4, 5, 6]])


def test_sample_is_magic_square():
    assert is_magic_square([[2, 7, 6], [9, 5, 1], [4, 3, 8]]) is True


def test_swapped_entries_break_magic_square():
    assert is_magic_square([[7, 2, 6], [9, 5, 1], [4, 3, 8]]) is False


def test_equal_diagonals_but_unequal_rows():
    assert is_magic_square([[1, 0], [0, 1]]) is False


def test_magic_square_needs_square():
    with pytest.raises(ValueError):
        is_magic_square([[1, 2]])


def test_sample_is_markov():
    assert is_markov([[0, 0, 1], [0.5, 0, 0.5], [1, 0, 0]]) is True


def test_row_not_summing_to_one_is_not_markov():
    assert is_markov([[0, 0, 1], [0.5, 0, 0.4], [1, 0, 0]]) is False


def test_markov_sums_tenths_exactly():
    assert is_markov([[0.1] * 10 for _ in range(10)]) is True


def test_markov_needs_square():
    with pytest.raises(ValueError):
        is_markov([[1, 0, 0]])


def test_max_path_sum_sample():
    assert max_path_sum(PATH_MATRIX) == 74


def test_max_path_sum_does_not_modify_input():
    original = copy.deepcopy(PATH_MATRIX)
    max_path_sum(PATH_MATRIX)
    assert PATH_MATRIX == original


def test_single_row_gives_its_maximum():
    row = [3, 9, 4, 1]
    assert max_path_sum([row]) == max(row)


def test_single_column_gives_its_sum():
    column = [[2], [5], [7]]
    assert max_path_sum(column) == sum(value for (value,) in column)


def test_negative_entries_floor_at_zero():
    assert max_path_sum([[-5, -3], [-2, -8]]) == 0


def test_path_moves_only_to_neighbouring_columns():
    # The two large values are three columns apart, so no path takes both.
    matrix = [[100, 0, 0, 0], [0, 0, 0, 100]]
    assert max_path_sum(matrix) < 200
    assert max_path_sum(matrix) >= 100


def test_max_path_sum_rejects_ragged_rows():
    with pytest.raises(ValueError):
        max_path_sum([[1, 2], [3]])