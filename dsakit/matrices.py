"""Checks and path sums over integer and real matrices."""

from __future__ import annotations

import math
from collections.abc import Sequence

__all__ = [
    "is_diagonally_dominant",
    "is_magic_square",
    "is_markov",
    "max_path_sum",
]


def _square_size(matrix: Sequence[Sequence[float]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return size


def is_diagonally_dominant(matrix: Sequence[Sequence[float]]) -> bool:
    """Tell whether every diagonal entry is at least the sum of the rest of its row.

    All comparisons use absolute values.
    """
    _square_size(matrix)
    for i, row in enumerate(matrix):
        diagonal = abs(row[i])
        others = sum(abs(value) for value in row) - diagonal
        if diagonal < others:
            return False
    return True


def is_magic_square(matrix: Sequence[Sequence[int]]) -> bool:
    """Tell whether all rows, columns and both diagonals have the same sum."""
    _square_size(matrix)
    target = sum(row[i] for i, row in enumerate(matrix))
    if sum(row[-1 - i] for i, row in enumerate(matrix)) != target:
        return False
    if any(sum(row) != target for row in matrix):
        return False
    return all(sum(column) == target for column in zip(*matrix))


def is_markov(matrix: Sequence[Sequence[float]]) -> bool:
    """Tell whether every row sums to exactly one."""
    _square_size(matrix)
    return all(math.fsum(row) == 1 for row in matrix)


def max_path_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Largest sum of a path from the top row to the bottom row.

    Each step goes down to the cell directly below or diagonally below.
    The result is never less than zero. The input is not modified.
    """
    if not matrix:
        return 0
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    best = list(matrix[0])
    for row in matrix[1:]:
        best = [
            value + max(best[max(j - 1, 0) : j + 2]) for j, value in enumerate(row)
        ]
    return max([0, *best])