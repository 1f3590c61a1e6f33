"""Recursive problems with and without memoization."""

from __future__ import annotations

from collections.abc import Sequence


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number by plain recursion; 0 for n <= 0."""
    if n <= 0:
        return 0
    if n == 1:
        return 1
    return fibonacci(n - 1) + fibonacci(n - 2)


def fibonacci_memo(n: int, memo: dict[int, int] | None = None) -> int:
    """Return the ``n``-th Fibonacci number, caching results in ``memo``."""
    if memo is None:
        memo = {}
    if n <= 0:
        return 0
    if n == 1:
        return 1
    if n in memo:
        return memo[n]
    result = fibonacci_memo(n - 1, memo) + fibonacci_memo(n - 2, memo)
    memo[n] = result
    return result


def _valid_cell(grid: Sequence[Sequence[int]], row: int, col: int) -> bool:
    if row >= len(grid):
        return False
    if col >= len(grid[row]):
        return False
    return grid[row][col] != 1


def count_paths(
    grid: Sequence[Sequence[int]],
    size: int,
    row: int = 0,
    col: int = 0,
    memo: dict[tuple[int, int], int] | None = None,
) -> int:
    """Count right/down paths from (row, col) to the bottom-right cell of a square grid.

    Cells holding 1 are blocked.
    """
    if memo is None:
        memo = {}
    if not _valid_cell(grid, row, col):
        return 0
    if row == size - 1 and col == size - 1:
        return 1
    key = (row, col)
    if not memo.get(key):
        memo[key] = count_paths(grid, size, row + 1, col, memo) + count_paths(
            grid, size, row, col + 1, memo
        )
    return memo[key]