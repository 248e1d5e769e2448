"""
Binary Search Tree implementation for ordered key-value storage.

The tree is never rebalanced: every operation is O(h), where h degrades to
O(N) for sorted insertion order. All walks use explicit stacks, so deep
trees never hit the interpreter recursion limit.
"""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from statistics import fmean
from typing import Any

from bstmap.interfaces.ordered_map import OrderedMap
from bstmap.models.exceptions import (
    DuplicateKeyError,
    EmptyResultError,
    EmptyTreeError,
    KeyNotFoundError,
)

logger = logging.getLogger(__name__)

Comparator = Callable[[Any, Any], int]


def natural_order(a: Any, b: Any) -> int:
    """Three-way comparison using the keys' own ordering."""
    return (a > b) - (a < b)


class TraversalOrder(IntEnum):
    """Depth-first visiting orders supported by the tree."""

    IN_ORDER = 0  # left, node, right
    PRE_ORDER = 1  # node, left, right
    POST_ORDER = 2  # left, right, node
    DESCENDING = 3  # right, node, left


@dataclass(eq=False)
class Node:
    """
    Node in the Binary Search Tree.

    Each node exclusively owns its children. `height` is bookkeeping for a
    balanced variant and is not consulted by any tree operation.
    """

    key: Any
    value: Any
    left: "Node | None" = field(default=None, repr=False)
    right: "Node | None" = field(default=None, repr=False)
    height: int = 0

    def update_height(self) -> None:
        """Recompute height from the children's stored heights."""
        self.height = max(_height(self.left), _height(self.right)) + 1

    def balance_factor(self) -> int:
        """Left subtree height minus right subtree height."""
        return _height(self.left) - _height(self.right)


def _height(node: Node | None) -> int:
    return node.height if node is not None else -1


class BinarySearchTree(OrderedMap):
    """
    Unbalanced Binary Search Tree implementation of OrderedMap.

    Properties maintained:
    1. Keys are unique under the comparator
    2. Every key in a node's left subtree orders before the node's key
    3. Every key in a node's right subtree orders after the node's key
    4. size() equals the number of reachable nodes
    """

    def __init__(self, comparator: Comparator | None = None) -> None:
        """
        Initialize an empty tree.

        Args:
            comparator: Three-way comparison function returning a negative,
                zero or positive int. Defaults to the keys' natural order.
        """
        if comparator is not None and not callable(comparator):
            raise TypeError(
                f"comparator must be callable, got {type(comparator).__name__}"
            )

        self._comparator: Comparator = natural_order if comparator is None else comparator
        self._root: Node | None = None
        self._size: int = 0

    @property
    def comparator(self) -> Comparator:
        return self._comparator

    def is_empty(self) -> bool:
        return self._root is None

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def has(self, key: Any) -> bool:
        return self._find_node(key) is not None

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def search(self, key: Any) -> Any:
        """Retrieve value by key. O(h)"""
        node = self._find_node(key)
        if node is None:
            raise KeyNotFoundError(key)
        return node.value

    def insert(self, key: Any, value: Any) -> int:
        """Insert a new leaf for key. Duplicates are rejected, never merged. O(h)"""
        parent = None
        current = self._root
        comparison = 0

        while current is not None:
            comparison = self._comparator(key, current.key)
            if comparison == 0:
                raise DuplicateKeyError(key)
            parent = current
            current = current.left if comparison < 0 else current.right

        new_node = Node(key=key, value=value)
        if parent is None:
            self._root = new_node
        elif comparison < 0:
            parent.left = new_node
        else:
            parent.right = new_node

        self._size += 1
        logger.debug(f"Inserted key {key!r}, size is now {self._size}")
        return self._size

    def remove(self, key: Any) -> Any:
        """
        Remove a key-value pair and return the removed value. O(h)

        A node with two children takes the key and value of its in-order
        predecessor (the rightmost node of its left subtree), which is then
        spliced out in its place.
        """
        removed = self.search(key)

        parent = None
        node = self._root
        while True:
            comparison = self._comparator(key, node.key)
            if comparison == 0:
                break
            parent = node
            node = node.left if comparison < 0 else node.right

        if node.right is None:
            self._replace_child(parent, node, node.left)
        elif node.left is None:
            self._replace_child(parent, node, node.right)
        else:
            self._splice_predecessor(node)

        self._size -= 1
        logger.debug(f"Removed key {key!r}, size is now {self._size}")
        return removed

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self.iterator()

    def iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> Iterator[tuple[Any, Any]]:
        """Ascending (key, value) pairs with start <= key < end; None leaves a side open."""
        for node in _walk(self._root, TraversalOrder.IN_ORDER):
            if start is not None and self._comparator(node.key, start) < 0:
                continue
            if end is not None and self._comparator(node.key, end) >= 0:
                return
            yield node.key, node.value

    def in_order(self) -> list[Any]:
        """Values in ascending key order."""
        return self._values(TraversalOrder.IN_ORDER)

    def pre_order(self) -> list[Any]:
        """Values with each node before its left then right subtree."""
        return self._values(TraversalOrder.PRE_ORDER)

    def post_order(self) -> list[Any]:
        """Values with each node after its left then right subtree."""
        return self._values(TraversalOrder.POST_ORDER)

    def descending(self) -> list[Any]:
        """Values in descending key order."""
        return self._values(TraversalOrder.DESCENDING)

    def traverse(self) -> str:
        return "".join(f"{value}\n" for value in self.in_order())

    def __str__(self) -> str:
        if self.is_empty():
            return ""
        return self.traverse()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size})"

    def min(self) -> Any:
        """Value stored under the smallest key."""
        if self._root is None:
            raise EmptyTreeError("find the minimum")

        current = self._root
        while current.left is not None:
            current = current.left
        return current.value

    def is_root(self, key: Any) -> bool:
        if self._root is None:
            raise EmptyTreeError("check the root")
        return self._comparator(key, self._root.key) == 0

    def predecessor(self, key: Any) -> Any:
        """
        Value stored under the largest key strictly smaller than `key`.

        The key itself need not be present in the tree.

        Raises:
            EmptyTreeError: If the tree is empty.
            KeyNotFoundError: If no smaller key exists.
        """
        if self._root is None:
            raise EmptyTreeError("find a predecessor")

        node = self._find_predecessor(key)
        if node is None:
            raise KeyNotFoundError(key, f"Key {key!r} has no predecessor")
        return node.value

    def clone(self) -> "BinarySearchTree":
        """
        Deep-copy the node structure into a new tree.

        The copy keeps the comparator and shape and shares no node with this
        tree. Stored keys and values are shared by reference.
        """
        copy = BinarySearchTree(self._comparator)
        copy._root = _copy_subtree(self._root)
        copy._size = self._size
        logger.debug(f"Cloned tree of size {self._size}")
        return copy

    def subset_at_least(self, threshold: Any) -> "BinarySearchTree":
        """
        Build a new tree holding the entries whose key is >= threshold.

        Entries are visited in descending key order and inserted as they are
        met, so the result has the same shape as one built by inserting them
        from largest to smallest. The walk stops at the first key below the
        threshold: every key after it is smaller still.

        Raises:
            EmptyResultError: If no key qualifies.
        """
        subset = BinarySearchTree(self._comparator)

        for node in _walk(self._root, TraversalOrder.DESCENDING):
            if self._comparator(node.key, threshold) < 0:
                break
            subset.insert(node.key, node.value)

        if subset.is_empty():
            raise EmptyResultError(threshold)

        logger.debug(f"Built subset of {subset.size()} entries >= {threshold!r}")
        return subset

    def aggregate(self, extractor: Callable[[Any], float]) -> float:
        """
        Arithmetic mean of `extractor` applied to every stored value.

        Raises:
            EmptyTreeError: If the tree is empty.
        """
        if not callable(extractor):
            raise TypeError(
                f"extractor must be callable, got {type(extractor).__name__}"
            )
        if self._root is None:
            raise EmptyTreeError("aggregate")

        return fmean(extractor(value) for value in self.in_order())

    def count_matching(self, predicate: Callable[[Any], bool]) -> int:
        """Number of stored values satisfying `predicate`. 0 on an empty tree."""
        if not callable(predicate):
            raise TypeError(
                f"predicate must be callable, got {type(predicate).__name__}"
            )

        return sum(
            1
            for node in _walk(self._root, TraversalOrder.IN_ORDER)
            if predicate(node.value)
        )

    def _values(self, order: TraversalOrder) -> list[Any]:
        """Collect values in the given order, failing on an empty tree."""
        if self._root is None:
            raise EmptyTreeError(f"traverse {order.name.lower().replace('_', '-')}")
        return [node.value for node in _walk(self._root, order)]

    def _find_node(self, key: Any) -> Node | None:
        """Find node by key."""
        current = self._root
        while current is not None:
            comparison = self._comparator(key, current.key)
            if comparison < 0:
                current = current.left
            elif comparison > 0:
                current = current.right
            else:
                return current
        return None

    def _find_predecessor(self, key: Any) -> Node | None:
        """Find the node holding the largest key strictly below `key`."""
        current = self._root
        candidate = None

        while current is not None:
            comparison = self._comparator(key, current.key)
            if comparison > 0:
                candidate = current
                current = current.right
            elif comparison < 0:
                current = current.left
            else:
                if current.left is not None:
                    current = current.left
                    while current.right is not None:
                        current = current.right
                    return current
                return candidate

        return candidate

    def _replace_child(self, parent: Node | None, node: Node, child: Node | None) -> None:
        """Replace node with child in its parent's slot."""
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def _splice_predecessor(self, node: Node) -> None:
        """Overwrite node with its in-order predecessor and unlink the predecessor."""
        parent = node
        predecessor = node.left
        while predecessor.right is not None:
            parent = predecessor
            predecessor = predecessor.right

        node.key = predecessor.key
        node.value = predecessor.value

        # The predecessor has no right child, so its left child takes its place
        if parent is node:
            parent.left = predecessor.left
        else:
            parent.right = predecessor.left


def _walk(root: Node | None, order: TraversalOrder) -> Iterator[Node]:
    """Yield every node under root in the given depth-first order."""
    if root is None:
        return

    if order == TraversalOrder.PRE_ORDER:
        stack = [root]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return

    if order == TraversalOrder.POST_ORDER:
        pending: list[tuple[Node, bool]] = [(root, False)]
        while pending:
            node, children_done = pending.pop()
            if children_done:
                yield node
                continue
            pending.append((node, True))
            if node.right is not None:
                pending.append((node.right, False))
            if node.left is not None:
                pending.append((node.left, False))
        return

    # In-order and descending mirror each other
    ascending = order == TraversalOrder.IN_ORDER
    stack = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left if ascending else current.right
        node = stack.pop()
        yield node
        current = node.right if ascending else node.left


def _copy_subtree(root: Node | None) -> Node | None:
    """Copy every node under root into a new, unshared structure."""
    if root is None:
        return None

    copy_root = Node(key=root.key, value=root.value)
    pending = [(root, copy_root)]
    while pending:
        source, target = pending.pop()
        if source.left is not None:
            target.left = Node(key=source.left.key, value=source.left.value)
            pending.append((source.left, target.left))
        if source.right is not None:
            target.right = Node(key=source.right.key, value=source.right.value)
            pending.append((source.right, target.right))

    return copy_root
