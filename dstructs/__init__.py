"""Classic data structures: hash tables, heaps, search trees, threaded trees and expression trees."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "double_hashing",
    "linear_probing",
    "open_hashing",
    "heap_sort",
    "priority_queue",
    "avl",
    "bst",
    "binary_tree",
    "expression_tree",
    "right_threaded",
    "left_threaded",
]