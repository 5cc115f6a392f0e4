# dsalgo

Classic data structures and algorithms as a small Python library with no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsalgo.fixedarray` | `BoundedArray` and the functions `binary_search`, `binary_search_recursive`, `backwards`, `square_series_sum` |
| `dsalgo.setops` | `merge`, `union`, `intersection`, `difference` on ascending sequences, and `union_unsorted` |
| `dsalgo.hashtables` | `ChainedHashTable`, `LinearProbingTable`, `QuadraticProbingTable`, `DoubleHashingTable`, `TableFullError`, `is_prime` |
| `dsalgo.trie` | `Trie` |
| `dsalgo.fenwick` | `FenwickTree` |
| `dsalgo.graph` | `bfs`, `dfs` over an adjacency matrix |
| `dsalgo.spanning` | `SpanningTree` (Prim's method) and the constant `INF` |
| `dsalgo.bst` | `Node`, `BinarySearchTree` |
| `dsalgo.avl` | `AVLNode`, `AVLTree` |
| `dsalgo.heap` | `MaxHeap`, `build_max_heap`, `build_min_heap`, `heapify`, `heap_sort`, `heap_sort_descending` |

## Arrays

`BoundedArray(capacity, values)` holds integers and never grows beyond
`capacity`. It supports `len()`, iteration and indexing, and the methods
`append`, `insert`, `delete` (returns the removed value), `insert_sorted`,
`linear_search`, `search_move_to_front`, `search_transpose`, `total`,
`average`, `maximum`, `minimum`, `is_sorted`, `reverse`, `rotate_left`,
`partition_signs` (negatives first) and `first_missing(first)`.

Adding to a full array raises `OverflowError`; a bad index raises
`IndexError`; `average`, `maximum` and `minimum` of an empty array raise
`ValueError`. Searches return the index found, or `None`.

```python
from dsalgo.fixedarray import BoundedArray, binary_search

arr = BoundedArray(20, [2, 3, 4, 5, 6])
arr.append(10)
print(list(arr))                          # [2, 3, 4, 5, 6, 10]
print(binary_search([2, 3, 4, 5, 6], 5))  # 3
```

## Set operations

```python
from dsalgo.setops import union, intersection, difference, union_unsorted

print(union([2, 4, 6], [4, 5, 6]))         # [2, 4, 5, 6]
print(intersection([2, 3, 4], [1, 3, 5]))  # [3]
print(difference([2, 3, 4], [1, 3, 5]))    # [2, 4]
print(union_unsorted([3, 1], [1, 2]))      # [3, 1, 2]
```

## Hash tables

`ChainedHashTable(buckets=10)` keeps each bucket sorted; `search` returns
the key or `None`, and `bucket(index)` shows a bucket's keys.

The open-addressing tables take a slot count. `insert` raises
`TableFullError` when the probe sequence finds no free slot, `search`
returns the slot index or `None`, `delete` raises `KeyError` for an absent
value, and `slots()` lists every slot with `None` for empty ones.
`DoubleHashingTable` uses the largest prime not above the size for its
second hash and needs a size of at least 2.

```python
from dsalgo.hashtables import LinearProbingTable

table = LinearProbingTable(10)
for value in (16, 26, 5):
    table.insert(value)
print(table.search(26))  # 7
```

## Trie and Fenwick tree

```python
from dsalgo.trie import Trie
from dsalgo.fenwick import FenwickTree

trie = Trie()
trie.insert("algorithm")
print("algorithm" in trie, trie.has_prefix("algo"))  # True True

fenwick = FenwickTree([1, 0, 2, 1, 1, 3])
print(fenwick.prefix_sum(4))   # 4, the sum of the first four values
fenwick.update(10, 2)          # set the value at index 2 to 10
print(fenwick.prefix_sum(4))   # 12
```

## Graphs

`bfs(adjacency, start)` and `dfs(adjacency, start)` return the vertices
reachable from `start`, in visiting order; a nonzero matrix entry is an
edge. `SpanningTree(adjacency)` takes a symmetric cost matrix with `INF`
for missing edges; `edges()`, `cost()` and `describe()` report the tree.
A disconnected graph raises `ValueError`.

## Trees

`BinarySearchTree` is built from values or with `from_preorder` /
`from_postorder`. `AVLTree` rebalances after every insert and delete and
reports `balance_factor()` and `inorder_with_balance()`. Both ignore
duplicate inserts, raise `KeyError` when deleting an absent value, and
offer `height`, `inorder`, `preorder`, `level_order`, `in` and `len()`.

```python
from dsalgo.bst import BinarySearchTree
from dsalgo.avl import AVLTree

tree = BinarySearchTree.from_preorder([50, 40, 30, 45, 60, 55, 70])
print(tree.inorder())  # [30, 40, 45, 50, 55, 60, 70]

avl = AVLTree([30, 20, 40, 50, 10])
avl.delete(20)
print(avl.inorder(), avl.balance_factor())
```

## Heaps

```python
from dsalgo.heap import MaxHeap, heap_sort

heap = MaxHeap([30, 20, 15, 5, 10])
print(heap.pop())              # 30
print(list(heap.drain()))      # [20, 15, 10, 5]
print(heap_sort([5, 3, 8, 1])) # [1, 3, 5, 8]
```

`pop` and `peek` on an empty heap raise `IndexError`.

## What it does not do

This is a library only: there are no command-line tools or interactive
menus, and nothing is printed or read from standard input. All structures
live in memory; nothing is stored to disk.