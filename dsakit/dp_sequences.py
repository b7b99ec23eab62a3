"""Dynamic programming over sequences and grids."""

from __future__ import annotations

from bisect import bisect_left
from itertools import accumulate
from typing import Sequence

_MOVES = ((1, 0), (-1, 0), (0, 1), (0, -1))


def can_jump(nums: Sequence[int]) -> bool:
    """Return True if the last index is reachable from the first, where
    ``nums[i]`` is the longest jump allowed from index ``i``."""
    reach = 0
    for index, jump in enumerate(nums):
        if index > reach:
            return False
        reach = max(reach, index + jump)
    return True


def length_of_lis(nums: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in nums:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def max_sum_increasing_subsequence(values: Sequence[int]) -> int:
    """Return the largest sum of a strictly increasing subsequence.

    Raise ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("sequence is empty")
    sums: list[int] = []
    for i, value in enumerate(values):
        best_before = max(
            (sums[j] for j in range(i) if values[j] < value), default=0
        )
        sums.append(value + max(best_before, 0) if best_before else value)
    return max(sums)


def longest_increasing_path(matrix: Sequence[Sequence[int]]) -> int:
    """Return the number of cells on the longest strictly increasing path
    moving up, down, left or right; 0 for an empty matrix."""
    if not matrix or not matrix[0]:
        return 0
    rows, cols = len(matrix), len(matrix[0])
    cells = sorted(
        ((r, c) for r in range(rows) for c in range(cols)),
        key=lambda cell: matrix[cell[0]][cell[1]],
        reverse=True,
    )
    length: dict[tuple[int, int], int] = {}
    for r, c in cells:
        value = matrix[r][c]
        best = 1
        for dr, dc in _MOVES:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols and matrix[nr][nc] > value:
                best = max(best, 1 + length[nr, nc])
        length[r, c] = best
    return max(length.values())


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Return the smallest sum along a path from the top-left to the
    bottom-right cell moving only right or down.

    Raise ValueError for an empty grid.
    """
    if not grid or not grid[0]:
        raise ValueError("grid is empty")
    costs = list(accumulate(grid[0]))
    for row in grid[1:]:
        updated: list[int] = []
        for column, value in enumerate(row):
            best = costs[column] if not updated else min(costs[column], updated[-1])
            updated.append(best + value)
        costs = updated
    return costs[-1]