import pytest

from dsreview.memoization import count_paths, fibonacci, fibonacci_memo


def test_fibonacci():
    assert fibonacci(6) == 8


@pytest.mark.parametrize("n, expected", [(-3, 0), (0, 0), (1, 1), (2, 1), (10, 55)])
def test_fibonacci_small_values(n, expected):
    assert fibonacci(n) == expected


def test_fibonacci_with_memoization():
    assert fibonacci_memo(6, None) == 8


def test_fibonacci_memo_fills_cache():
    memo = {}
    assert fibonacci_memo(6, memo) == 8
    assert memo[6] == 8
    assert memo[5] == 5


def test_fibonacci_memo_matches_plain():
    assert [fibonacci_memo(n) for n in range(15)] == [fibonacci(n) for n in range(15)]


def test_count_paths():
    grid = [
        [0, 0, 0, 0],
        [0, 1, 0, 0],
        [0, 0, 1, 0],
        [0, 0, 0, 0],
    ]
    assert count_paths(grid, 4, 0, 0, None) == 4


def test_count_paths_open_grid():
    grid = [[0, 0], [0, 0]]
    assert count_paths(grid, 2, 0, 0, None) == 2


def test_count_paths_blocked_start():
    grid = [[1, 0], [0, 0]]
    assert count_paths(grid, 2, 0, 0, None) == 0


def test_count_paths_from_goal():
    grid = [[0, 0], [0, 0]]
    assert count_paths(grid, 2, 1, 1, None) == 1