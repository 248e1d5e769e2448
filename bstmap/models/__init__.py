"""
Data models for the ordered map.
"""

from bstmap.models.exceptions import (
    DuplicateKeyError,
    EmptyResultError,
    EmptyTreeError,
    ErrorKind,
    KeyNotFoundError,
    OrderedMapError,
)
from bstmap.models.student import Student

__all__ = [
    "DuplicateKeyError",
    "EmptyResultError",
    "EmptyTreeError",
    "ErrorKind",
    "KeyNotFoundError",
    "OrderedMapError",
    "Student",
]
