"""
Ordered key-value map backed by an unbalanced binary search tree.

This package provides an ordered map with:
- insert(key, value) - Unique-key insertion, O(h)
- search(key) - Lookup by key, O(h)
- remove(key) - Deletion by in-order predecessor copy, O(h)
- in_order / pre_order / post_order / descending - Traversals over values
- min, predecessor, clone, subset_at_least, aggregate, count_matching

where h is the height of the tree (no rebalancing is performed).
"""

from bstmap.models.exceptions import (
    DuplicateKeyError,
    EmptyResultError,
    EmptyTreeError,
    ErrorKind,
    KeyNotFoundError,
    OrderedMapError,
)
from bstmap.models.sortedcontainers import BinarySearchTree

__all__ = [
    "BinarySearchTree",
    "DuplicateKeyError",
    "EmptyResultError",
    "EmptyTreeError",
    "ErrorKind",
    "KeyNotFoundError",
    "OrderedMapError",
]
