import pytest

from dsakit.dp_sequences import (
    can_jump,
    length_of_lis,
    longest_increasing_path,
    max_sum_increasing_subsequence,
    min_path_sum,
)


@pytest.mark.parametrize("nums", [[], [0], [2, 3, 1, 1, 4], [1, 1, 1, 0]])
def test_can_jump_reachable(nums):
    assert can_jump(nums) is True


@pytest.mark.parametrize("nums", [[0, 1], [3, 2, 1, 0, 4], [1, 0, 5]])
def test_can_jump_blocked(nums):
    assert can_jump(nums) is False


def test_lis_empty():
    assert length_of_lis([]) == 0


def test_lis_increasing_and_decreasing():
    values = [1, 4, 7, 9, 12]
    assert length_of_lis(values) == len(values)
    assert length_of_lis(values[::-1]) == 1


def test_lis_duplicates_are_not_increasing():
    assert length_of_lis([2, 2, 2, 2]) == 1


def test_lis_worked_example():
    assert length_of_lis([10, 9, 2, 5, 3, 7, 101, 18]) == 4


@pytest.mark.parametrize("nums", [[3, 1, 2], [5, 1, 6, 2, 7], [0, 0, 1, -1, 2]])
def test_lis_bounded_and_prefix_monotone(nums):
    result = length_of_lis(nums)
    assert 1 <= result <= len(nums)
    assert length_of_lis(nums[:-1]) <= result


def test_msis_worked_example():
    assert max_sum_increasing_subsequence([10, 22, 9, 33, 21, 50, 41, 60]) == 175


def test_msis_increasing_takes_everything():
    values = [1, 2, 3, 10]
    assert max_sum_increasing_subsequence(values) == sum(values)


def test_msis_decreasing_takes_largest():
    values = [9, 7, 4, 1]
    assert max_sum_increasing_subsequence(values) == max(values)


def test_msis_all_negative_takes_largest():
    values = [-5, -3, -9]
    assert max_sum_increasing_subsequence(values) == max(values)


def test_msis_empty_raises():
    with pytest.raises(ValueError):
        max_sum_increasing_subsequence([])


def test_lip_empty():
    assert longest_increasing_path([]) == 0
    assert longest_increasing_path([[]]) == 0


def test_lip_constant_matrix():
    assert longest_increasing_path([[4, 4], [4, 4]]) == 1


def test_lip_snake_covers_all_cells():
    matrix = [[1, 2, 3], [6, 5, 4], [7, 8, 9]]
    assert longest_increasing_path(matrix) == sum(len(row) for row in matrix)


def test_lip_single_row_allows_both_directions():
    row = [3, 2, 1, 5, 6]
    assert longest_increasing_path([row]) == longest_increasing_path([row[::-1]])


@pytest.mark.parametrize(
    "matrix",
    [[[9, 9, 4], [6, 6, 8], [2, 1, 1]], [[3, 4, 5], [3, 2, 6], [2, 2, 1]], [[1, 5], [2, 3]]],
)
def test_lip_invariant_under_transpose_and_negation(matrix):
    result = longest_increasing_path(matrix)
    transposed = [list(column) for column in zip(*matrix)]
    negated = [[-value for value in row] for row in matrix]
    assert longest_increasing_path(transposed) == result
    assert longest_increasing_path(negated) == result


def test_min_path_worked_example():
    assert min_path_sum([[1, 3, 1], [1, 5, 1], [4, 2, 1]]) == 7


def test_min_path_single_row_and_column():
    row = [2, 7, 1, 8]
    assert min_path_sum([row]) == sum(row)
    assert min_path_sum([[value] for value in row]) == sum(row)


def test_min_path_uniform_grid():
    rows, cols = 3, 5
    grid = [[1] * cols for _ in range(rows)]
    assert min_path_sum(grid) == rows + cols - 1


def test_min_path_transpose_invariant():
    grid = [[1, 2, 3], [4, 5, 6]]
    transposed = [list(column) for column in zip(*grid)]
    assert min_path_sum(grid) == min_path_sum(transposed)


def test_min_path_empty_raises():
    with pytest.raises(ValueError):
        min_path_sum([])