"""Interval edges and the orderings used to sort and sweep them.

An edge is either a ``Bound`` (a value plus a closure) or ``None`` for an
unbounded side. Lower and upper edges order differently at equal values:
an inclusive lower edge starts earlier than an exclusive one, while an
exclusive upper edge ends earlier than an inclusive one.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Protocol, TypeVar


class Comparable(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=Comparable)


class BoundType(Enum):
    INCLUSIVE = "inclusive"
    EXCLUSIVE = "exclusive"

    def flip(self) -> "BoundType":
        if self is BoundType.INCLUSIVE:
            return BoundType.EXCLUSIVE
        return BoundType.INCLUSIVE


INCLUSIVE = BoundType.INCLUSIVE
EXCLUSIVE = BoundType.EXCLUSIVE


@dataclass(frozen=True)
class Bound(Generic[T]):
    value: T
    type: BoundType

    def __post_init__(self) -> None:
        if not isinstance(self.type, BoundType):
            raise TypeError(
                f"Bound type must be a BoundType, got {type(self.type).__name__!r}: "
                f"{self.type!r}\n"
                f"Hint: use BoundType.INCLUSIVE or BoundType.EXCLUSIVE"
            )

    @property
    def inclusive(self) -> bool:
        return self.type is BoundType.INCLUSIVE

    def flip(self) -> "Bound[T]":
        """Same value, opposite closure (the edge of the complement)."""
        return Bound(self.value, self.type.flip())


def _compare_values(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def compare_lower(a: Bound[T] | None, b: Bound[T] | None) -> int:
    """Order two lower edges; ``None`` is below everything."""
    if a is None or b is None:
        return (b is None) - (a is None)
    order = _compare_values(a.value, b.value)
    if order or a.type is b.type:
        return order
    return -1 if a.inclusive else 1


def compare_upper(a: Bound[T] | None, b: Bound[T] | None) -> int:
    """Order two upper edges; ``None`` is above everything."""
    if a is None or b is None:
        return (a is None) - (b is None)
    order = _compare_values(a.value, b.value)
    if order or a.type is b.type:
        return order
    return 1 if a.inclusive else -1


def max_lower(a: Bound[T] | None, b: Bound[T] | None) -> Bound[T] | None:
    return a if compare_lower(a, b) >= 0 else b


def min_upper(a: Bound[T] | None, b: Bound[T] | None) -> Bound[T] | None:
    return a if compare_upper(a, b) <= 0 else b


def max_upper(a: Bound[T] | None, b: Bound[T] | None) -> Bound[T] | None:
    return a if compare_upper(a, b) >= 0 else b


def reaches(upper: Bound[T] | None, lower: Bound[T] | None) -> bool:
    """True when nothing in the domain lies strictly between ``upper`` and ``lower``.

    Equal values only join when at least one side admits the shared value;
    ``2)`` followed by ``(2`` leaves the point 2 uncovered.
    """
    if upper is None or lower is None:
        return True
    order = _compare_values(upper.value, lower.value)
    if order:
        return order > 0
    return upper.inclusive or lower.inclusive


def is_nonempty(lower: Bound[T] | None, upper: Bound[T] | None) -> bool:
    """True when ``lower``..``upper`` admits at least one value."""
    if lower is None or upper is None:
        return True
    order = _compare_values(lower.value, upper.value)
    if order:
        return order < 0
    return lower.inclusive and upper.inclusive
