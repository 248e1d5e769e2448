"""
Sorted container implementations for the ordered map.
"""

from bstmap.models.sortedcontainers.binary_search_tree import BinarySearchTree, Node

__all__ = ["BinarySearchTree", "Node"]
