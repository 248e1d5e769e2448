"""
OrderedMap abstract base class for unique-key ordered containers.
"""

from abc import abstractmethod
from typing import Any

from bstmap.interfaces.range_iterable import RangeIterable


class OrderedMap(RangeIterable):
    """
    Abstract base class for ordered key-value maps with unique keys.

    Failed lookups and duplicate insertions raise typed errors from
    bstmap.models.exceptions instead of returning sentinels.

    Implementations:
    - BinarySearchTree: Unbalanced BST, O(h) operations
    """

    @abstractmethod
    def insert(self, key: Any, value: Any) -> int:
        """
        Insert a new key-value pair.

        Args:
            key: The key to insert. Must not already be present.
            value: The value to associate with the key.

        Returns:
            The number of entries after the insertion.

        Raises:
            DuplicateKeyError: If the key is already present.
        """
        pass

    @abstractmethod
    def search(self, key: Any) -> Any:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up.

        Returns:
            The stored value.

        Raises:
            KeyNotFoundError: If the key is absent.
        """
        pass

    @abstractmethod
    def remove(self, key: Any) -> Any:
        """
        Remove a key-value pair.

        Args:
            key: The key to remove.

        Returns:
            The value that was stored under the key.

        Raises:
            KeyNotFoundError: If the key is absent.
        """
        pass

    @abstractmethod
    def has(self, key: Any) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of key-value pairs.

        Time complexity: O(1)
        """
        pass

    def is_empty(self) -> bool:
        """Return True if the map holds no entries."""
        return self.size() == 0

    @abstractmethod
    def traverse(self) -> str:
        """
        Render every stored value in ascending key order, one per line.

        Raises:
            EmptyTreeError: If the map is empty.
        """
        pass
