"""
Abstract base classes for ordered map containers.
"""

from bstmap.interfaces.ordered_map import OrderedMap
from bstmap.interfaces.range_iterable import RangeIterable

__all__ = ["OrderedMap", "RangeIterable"]
