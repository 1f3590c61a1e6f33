"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any


class QueueEmptyError(IndexError):
    """Raised when reading from an empty queue."""

    def __init__(self) -> None:
        super().__init__("queue is empty")


class Queue:
    """FIFO container of arbitrary values."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Return True when the queue holds no items."""
        return not self._items

    def peek(self) -> Any:
        """Return the front item without removing it."""
        if not self._items:
            raise QueueEmptyError()
        return self._items[0]

    def add(self, value: Any) -> None:
        """Append ``value`` to the back of the queue."""
        self._items.append(value)

    def remove(self) -> Any:
        """Remove and return the front item."""
        if not self._items:
            raise QueueEmptyError()
        return self._items.popleft()