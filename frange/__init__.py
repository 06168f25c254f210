from .bound import EXCLUSIVE, INCLUSIVE, Bound, BoundType
from .core import MultiRange, intersection, union
from .range import InvalidRangeError, Range, touches_or_overlaps

__all__ = [
    "Bound",
    "BoundType",
    "INCLUSIVE",
    "EXCLUSIVE",
    "Range",
    "MultiRange",
    "InvalidRangeError",
    "touches_or_overlaps",
    "union",
    "intersection",
]
