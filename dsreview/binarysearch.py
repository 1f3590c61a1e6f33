"""Binary search over sorted integer sequences."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(data: Sequence[int], value: int) -> bool:
    """Return True when ``value`` is found by iterative bisection of ``data``.

    The search window starts at index 1, so the first element is never examined.
    """
    left, right = 1, len(data) - 1
    while left <= right:
        mid = (left + right) // 2
        if data[mid] == value:
            return True
        if value < data[mid]:
            right = mid - 1
        else:
            left = mid + 1
    return False


def binary_search_recursive(data: Sequence[int], value: int) -> bool:
    """Return True when ``value`` is present in the sorted ``data``."""

    def search(left: int, right: int) -> bool:
        if left > right:
            return False
        mid = (left + right) // 2
        if data[mid] == value:
            return True
        if value < data[mid]:
            return search(left, mid - 1)
        return search(mid + 1, right)

    return search(0, len(data) - 1)