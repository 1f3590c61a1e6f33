"""A character trie for word lookups."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    is_complete_word: bool = False


class Trie:
    """Prefix tree keyed by characters."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert_word(self, word: str) -> None:
        """Add ``word``, replacing any existing nodes along its path."""
        node = self._root
        for char in word:
            node.children[char] = _TrieNode()
            node = node.children[char]
        node.is_complete_word = True

    def is_complete_word(self, word: str) -> bool:
        """Return True when every character of ``word`` lies on a path from the root."""
        node = self._root
        for char in word:
            child = node.children.get(char)
            if child is None:
                return False
            node = child
        return True