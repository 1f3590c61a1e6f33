"""A fixed-size hash table with chained buckets keyed by FNV-1."""

from __future__ import annotations

from dsreview.fnv import fnv1


class HashTable:
    """Hash table whose buckets hold keys and values in insertion order."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("hash table size must be positive")
        self.size = size
        self._table: list[list[str] | None] = [None] * size

    def _slot(self, key: str) -> int:
        return fnv1(key.encode()) % self.size

    def insert(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``."""
        slot = self._slot(key)
        bucket = self._table[slot]
        if bucket is None:
            bucket = self._table[slot] = []
        bucket.extend((key, value))

    def get(self, key: str) -> str:
        """Return the value stored for ``key``; raise KeyError if absent."""
        bucket = self._table[self._slot(key)]
        if not bucket:
            raise KeyError("list does not exist")
        for entry, following in zip(bucket, bucket[1:]):
            if entry == key:
                return following
        raise KeyError("value not found")