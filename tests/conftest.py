"""
Shared pytest fixtures for ordered map tests.
"""

import pytest

from bstmap.models import Student
from bstmap.models.sortedcontainers import BinarySearchTree


@pytest.fixture
def empty_tree():
    """Provide a fresh, empty tree with natural key ordering."""
    return BinarySearchTree()


@pytest.fixture
def int_tree():
    """
    Provide a balanced-by-construction tree of integer keys.

              50
           /      \\
         30        70
        /  \\     /  \\
      20    40   60    80
    """
    tree = BinarySearchTree()
    for key in [50, 30, 70, 20, 40, 60, 80]:
        tree.insert(key, f"v{key}")
    return tree


@pytest.fixture
def sample_students():
    """Provide the three sample students, in insertion order."""
    return [
        Student(101, "Amanda", 85.5),
        Student(205, "Carlos", 92.0),
        Student(310, "Eduardo", 78.5),
    ]


@pytest.fixture
def student_tree(sample_students):
    """Provide a tree of the sample students keyed by name."""
    tree = BinarySearchTree()
    for student in sample_students:
        tree.insert(student.name, student)
    return tree
