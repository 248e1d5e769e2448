"""
Custom exceptions for the ordered map.
"""

from enum import IntEnum
from typing import Any


class ErrorKind(IntEnum):
    """Kind of failure reported by an ordered map operation."""

    DUPLICATE_KEY = 0  # Insert of a key already present
    NOT_FOUND = 1  # Lookup target absent
    EMPTY_TREE = 2  # Result undefined on an empty tree
    EMPTY_RESULT = 3  # Derived query produced nothing


class OrderedMapError(Exception):
    """
    Base class for all ordered map failures.

    Every subclass sets `kind` (None on the base class), so callers can
    either catch a specific subclass or catch this base class and branch
    on `err.kind`.
    """

    kind: ErrorKind | None = None


class DuplicateKeyError(OrderedMapError):
    """Raised when inserting a key that is already stored. The map is left unmodified."""

    kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"Key {key!r} is already present")


class KeyNotFoundError(OrderedMapError):
    """Raised when a search, removal or predecessor target does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, key: Any, message: str | None = None):
        """
        Initialize not-found error.

        Args:
            key: The key that could not be resolved.
            message: Optional message overriding the default one.
        """
        self.key = key
        super().__init__(message or f"Key {key!r} not found")


class EmptyTreeError(OrderedMapError):
    """Raised when an operation has no defined result on an empty tree."""

    kind = ErrorKind.EMPTY_TREE

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot {operation}: the tree is empty")


class EmptyResultError(OrderedMapError):
    """
    Raised when a subset query finds no qualifying entry.

    The partially built result is discarded.
    """

    kind = ErrorKind.EMPTY_RESULT

    def __init__(self, threshold: Any):
        self.threshold = threshold
        super().__init__(f"No entry with key >= {threshold!r}")
