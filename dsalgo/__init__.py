"""Classic data structures and algorithms: bounded arrays, set operations, hash tables, a trie, a Fenwick tree, graph traversal, spanning trees, search trees and heaps."""

__version__ = "0.1.0"

__all__ = [
    "avl",
    "bst",
    "fenwick",
    "fixedarray",
    "graph",
    "hashtables",
    "heap",
    "setops",
    "spanning",
    "trie",
]