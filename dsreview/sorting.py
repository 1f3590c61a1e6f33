"""In-place sorting algorithms for lists of integers."""

from __future__ import annotations

from dsreview.heaps import MaxHeap


def bubble_sort(array: list[int]) -> None:
    """Sort ``array`` in place by repeatedly swapping adjacent pairs."""
    end = len(array) - 1
    swapped = True
    while swapped:
        swapped = False
        for i in range(end):
            if array[i] > array[i + 1]:
                array[i], array[i + 1] = array[i + 1], array[i]
                swapped = True
        end -= 1


def heap_sort(array: list[int]) -> None:
    """Sort ``array`` in place by draining a MaxHeap; raise HeapEmptyError if empty."""
    heap = MaxHeap()
    for item in array:
        heap.insert(item)
    while True:
        largest = heap.extract_max()
        array[len(heap)] = largest
        if not len(heap):
            break


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sorted(items: list[int]) -> list[int]:
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(_merge_sorted(items[:mid]), _merge_sorted(items[mid:]))


def merge_sort(array: list[int]) -> None:
    """Sort ``array`` in place with a stable merge sort."""
    array[:] = _merge_sorted(list(array))


def _partition(array: list[int], left: int, right: int, pivot: int) -> int:
    while left <= right:
        while array[left] < pivot:
            left += 1
        while array[right] > pivot:
            right -= 1
        if left <= right:
            array[left], array[right] = array[right], array[left]
            left += 1
            right -= 1
    return left


def _quick_sort_range(array: list[int], left: int, right: int) -> None:
    if left >= right:
        return
    pivot = array[(left + right) // 2]
    split = _partition(array, left, right, pivot)
    _quick_sort_range(array, left, split - 1)
    _quick_sort_range(array, split, right)


def quick_sort(array: list[int]) -> None:
    """Sort ``array`` in place by partitioning around a middle pivot."""
    _quick_sort_range(array, 0, len(array) - 1)