"""Array-backed binary heaps of integers."""

from __future__ import annotations

from collections.abc import Callable
from operator import gt, lt


class HeapEmptyError(IndexError):
    """Raised when reading from an empty heap."""

    def __init__(self) -> None:
        super().__init__("heap is empty")


class NoRootParentError(ValueError):
    """Raised when asking for the parent of the root node."""

    def __init__(self) -> None:
        super().__init__("cannot get parent of root node")


class _ArrayHeap:
    """Complete binary tree stored in a list, ordered by ``_before``."""

    _before: Callable[[int, int], bool]

    def __init__(self) -> None:
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def get_parent(self, index: int) -> int:
        """Return the parent index of ``index``."""
        if index == 0:
            raise NoRootParentError()
        return (index - 1) // 2

    def get_left_child(self, index: int) -> int:
        """Return the left child index of ``index``."""
        return index * 2 + 1

    def get_right_child(self, index: int) -> int:
        """Return the right child index of ``index``."""
        return index * 2 + 2

    def has_left_child(self, index: int) -> bool:
        """Return True when ``index`` has a left child in the heap."""
        return self.get_left_child(index) < len(self._items)

    def has_right_child(self, index: int) -> bool:
        """Return True when ``index`` has a right child in the heap."""
        return self.get_right_child(index) < len(self._items)

    def peek(self) -> int:
        """Return the root element without removing it."""
        if not self._items:
            raise HeapEmptyError()
        return self._items[0]

    def value(self, index: int) -> int:
        """Return the element stored at ``index``."""
        return self._items[index]

    def insert(self, item: int) -> None:
        """Add ``item`` at the bottom of the tree and restore heap order."""
        self._items.append(item)
        self._sift_up()

    def _extract_root(self) -> int:
        if not self._items:
            raise HeapEmptyError()
        root = self._items[0]
        self._items[0] = self._items[-1]
        self._items.pop()
        self._sift_down()
        return root

    def _swap(self, a: int, b: int) -> None:
        items = self._items
        items[a], items[b] = items[b], items[a]

    def _sift_up(self) -> None:
        items = self._items
        index = len(items) - 1
        while index > 0:
            parent = self.get_parent(index)
            if not self._before(items[index], items[parent]):
                break
            self._swap(parent, index)
            index = parent

    def _sift_down(self) -> None:
        items = self._items
        index = 0
        while self.has_left_child(index):
            chosen = self.get_left_child(index)
            right = self.get_right_child(index)
            if self.has_right_child(index) and self._before(items[right], items[chosen]):
                chosen = right
            if self._before(items[index], items[chosen]):
                break
            self._swap(index, chosen)
            index = chosen


class MaxHeap(_ArrayHeap):
    """Heap whose root is its largest element."""

    _before = staticmethod(gt)

    def __init__(self) -> None:
        super().__init__()

    def __len__(self) -> int:
        return len(self._items)

    def get_parent(self, index: int) -> int:
        """Return the parent index of ``index``."""
        return super().get_parent(index)

    def has_left_child(self, index: int) -> bool:
        """Return True when ``index`` has a left child in the heap."""
        return super().has_left_child(index)

    def get_left_child(self, index: int) -> int:
        """Return the left child index of ``index``."""
        return super().get_left_child(index)

    def has_right_child(self, index: int) -> bool:
        """Return True when ``index`` has a right child in the heap."""
        return super().has_right_child(index)

    def get_right_child(self, index: int) -> int:
        """Return the right child index of ``index``."""
        return super().get_right_child(index)

    def peek(self) -> int:
        """Return the largest element without removing it."""
        return super().peek()

    def value(self, index: int) -> int:
        """Return the element stored at ``index``."""
        return super().value(index)

    def insert(self, item: int) -> None:
        """Add ``item`` and restore heap order."""
        super().insert(item)

    def extract_max(self) -> int:
        """Remove and return the largest element."""
        return self._extract_root()


class MinHeap(_ArrayHeap):
    """Heap whose root is its smallest element."""

    _before = staticmethod(lt)

    def __init__(self) -> None:
        super().__init__()

    def __len__(self) -> int:
        return len(self._items)

    def get_parent(self, index: int) -> int:
        """Return the parent index of ``index``."""
        return super().get_parent(index)

    def has_left_child(self, index: int) -> bool:
        """Return True when ``index`` has a left child in the heap."""
        return super().has_left_child(index)

    def get_left_child(self, index: int) -> int:
        """Return the left child index of ``index``."""
        return super().get_left_child(index)

    def has_right_child(self, index: int) -> bool:
        """Return True when ``index`` has a right child in the heap."""
        return super().has_right_child(index)

    def get_right_child(self, index: int) -> int:
        """Return the right child index of ``index``."""
        return super().get_right_child(index)

    def peek(self) -> int:
        """Return the smallest element without removing it."""
        return super().peek()

    def value(self, index: int) -> int:
        """Return the element stored at ``index``."""
        return super().value(index)

    def insert(self, item: int) -> None:
        """Add ``item`` and restore heap order."""
        super().insert(item)

    def extract_min(self) -> int:
        """Remove and return the smallest element."""
        return self._extract_root()