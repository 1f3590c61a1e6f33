"""Classic data structures and algorithms: hashes, hash table, graph searches, stack, queue, trie, heaps, sorts, trees, bit operations and memoization."""

__version__ = "0.1.0"