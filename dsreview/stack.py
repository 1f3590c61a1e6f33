"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Any


class StackEmptyError(IndexError):
    """Raised when reading from an empty stack."""

    def __init__(self) -> None:
        super().__init__("stack is empty")


class Stack:
    """LIFO container of arbitrary values."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Return True when the stack holds no items."""
        return not self._items

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise StackEmptyError()
        return self._items[-1]

    def push(self, value: Any) -> None:
        """Place ``value`` on top of the stack."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise StackEmptyError()
        return self._items.pop()