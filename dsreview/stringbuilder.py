"""Accumulate words and join them once."""

from __future__ import annotations

from collections.abc import Iterable


class StringBuilder:
    """Collects words and joins them with single spaces on demand."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, words: Iterable[str]) -> None:
        """Add ``words`` to the builder."""
        self._parts.extend(words)

    def build_string(self) -> str:
        """Return all collected words joined by spaces."""
        return " ".join(self._parts)