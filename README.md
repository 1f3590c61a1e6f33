# dsreview

A small collection of classic data structures and algorithms in plain Python,
with no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Contents

| Module | What it provides |
| --- | --- |
| `dsreview.fnv` | `fnv1`, `fnv1a`: 64-bit Fowler–Noll–Vo hashes of bytes; constants `FNV_OFFSET_BASIS`, `FNV_PRIME` |
| `dsreview.hashtable` | `HashTable`: fixed number of slots chosen by FNV-1, collisions chained |
| `dsreview.graph` | `Graph`, `GraphNode`: directed graph of integer-identified nodes |
| `dsreview.graphsearch` | `breadth_first_search`, `depth_first_search`: reachability between nodes |
| `dsreview.stack` | `Stack`, `StackEmptyError` |
| `dsreview.queue` | `Queue`, `QueueEmptyError` |
| `dsreview.stringbuilder` | `StringBuilder`: collects words and joins them with spaces |
| `dsreview.trie` | `Trie`: character prefix tree |
| `dsreview.heaps` | `MaxHeap`, `MinHeap`, `HeapEmptyError`, `NoRootParentError` |
| `dsreview.sorting` | `bubble_sort`, `heap_sort`, `merge_sort`, `quick_sort`, all sorting a list in place |
| `dsreview.binarysearch` | `binary_search`, `binary_search_recursive` |
| `dsreview.tree` | `Node`, `Tree`, `BinaryNode`, `BinaryTree`, with binary-node traversals |
| `dsreview.bits` | 8-bit signed and unsigned arithmetic, shifts and bitwise operations |
| `dsreview.memoization` | `fibonacci`, `fibonacci_memo`, `count_paths` |

## Examples

```python
from dsreview.fnv import fnv1, fnv1a
from dsreview.hashtable import HashTable
from dsreview.heaps import MaxHeap
from dsreview.sorting import merge_sort

fnv1(b"testing123")           # 8404323582830432641
fnv1a(b"testing123")          # 4517894324711253781

table = HashTable(1024)
table.insert("foo", "bar")
table.get("foo")              # "bar"

heap = MaxHeap()
for n in (10, 20, 30, 40):
    heap.insert(n)
heap.extract_max()            # 40
len(heap)                     # 3

numbers = [10, 5, 2, 7]
merge_sort(numbers)           # numbers is now [2, 5, 7, 10]
```

Graphs and searches:

```python
from dsreview.graph import Graph, GraphNode
from dsreview.graphsearch import breadth_first_search, depth_first_search

g = Graph()
a, b = GraphNode(1), GraphNode(2)
g.add_node(a)
g.add_node(b)
g.add_edge(1, 2)

breadth_first_search(g, a, b)  # True: takes nodes
depth_first_search(g, 1, 2)    # True: takes node ids
```

Binary tree traversals are generators:

```python
from dsreview.tree import BinaryNode

root = BinaryNode(8, BinaryNode(4), BinaryNode(12))
list(root.traverse_in_order())   # [4, 8, 12]
```

## Behaviour worth knowing

- **Errors.** Empty containers raise rather than return a status:
  `Stack.peek()`/`pop()` raise `StackEmptyError`, `Queue.peek()`/`remove()`
  raise `QueueEmptyError`, and `peek()`, `MaxHeap.extract_max()` and
  `MinHeap.extract_min()` raise `HeapEmptyError`. All three are subclasses of
  `IndexError`. `get_parent(0)` on a heap raises `NoRootParentError`
  (a `ValueError`).
- **HashTable.** The size must be positive (`ValueError` otherwise).
  `get()` raises `KeyError` for a missing key. Inserting a key twice keeps
  both entries; `get()` returns the first one inserted.
- **Graph.** `get_node()` and `add_edge()` raise `KeyError` for unknown ids.
  Each node's edges are in `GraphNode.adjacent`.
- **Trie.** `insert_word()` replaces any existing nodes along the word's
  path, and `is_complete_word()` returns `True` for any string whose
  characters lie on a path from the root, so prefixes of an inserted word
  count as well.
- **heap_sort** raises `HeapEmptyError` when given an empty list.
- **binary_search** starts its window at index 1, so it never finds the first
  element; `binary_search_recursive` searches the whole sequence.
- **Tree traversals.** `traverse_pre_order()` and `traverse_post_order()`
  yield the node's own value first or last, but visit each child subtree in
  order.
- **bits.** Unsigned functions (`add`, `subtract`, `shift_left`,
  `shift_right`, `bit_and`, `bit_or`, `bit_xor`) accept 0..255; signed ones
  (`add_signed`, `subtract_signed`, `twos_complement`, `shift_left_signed`,
  `shift_right_signed`, `clear`) accept -128..127. Out-of-range operands raise
  `ValueError`; results wrap as 8-bit values. `twos_complement(-5)` returns
  `"11111011"`.
- **memoization.** `fibonacci(n)` and `fibonacci_memo(n, memo=None)` return 0
  for `n <= 0`. `count_paths(grid, size, row=0, col=0, memo=None)` counts
  right/down paths to the bottom-right cell of a square grid, treating cells
  that hold 1 as blocked.

## What it does not do

This is a library only: it has no command-line interface and stores nothing
on disk.