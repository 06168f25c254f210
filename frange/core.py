import bisect
from collections.abc import Iterable, Iterator
from functools import cmp_to_key, reduce
from itertools import pairwise
from typing import Any, Generic

from typing_extensions import override

from frange.bound import (
    T,
    compare_lower,
    compare_upper,
    is_nonempty,
    max_lower,
    max_upper,
    min_upper,
)
from frange.range import Range, touches_or_overlaps
from frange.util import EMPTY_SET, UNION_SEPARATOR

_by_lower = cmp_to_key(lambda a, b: compare_lower(a.lower, b.lower))


def _canonicalize(ranges: Iterable[Range[T]]) -> tuple[Range[T], ...]:
    """Sort by lower edge and merge everything that touches or overlaps.

    Key invariant: the accumulator's lower edge is <= every range still to
    come, so only its upper edge can grow during a merge.
    """
    ordered = sorted(ranges, key=_by_lower)
    if not ordered:
        return ()

    merged: list[Range[T]] = []
    current = ordered[0]
    for nxt in ordered[1:]:
        if touches_or_overlaps(current, nxt):
            upper = max_upper(current.upper, nxt.upper)
            if upper is not current.upper:
                current = Range(current.lower, upper)
        else:
            merged.append(current)
            current = nxt
    merged.append(current)
    return tuple(merged)


class MultiRange(Generic[T]):
    """A subset of an ordered domain stored as sorted, disjoint, non-adjacent ranges.

    Instances are immutable. Every constructor and operation produces the
    canonical form, so two multi-ranges describe the same set exactly when
    their range sequences are equal.
    """

    __slots__ = ("_ranges",)

    def __init__(self, ranges: Iterable[Range[T]] = ()):
        self._ranges: tuple[Range[T], ...] = _canonicalize(ranges)

    @classmethod
    def create(cls, ranges: Iterable[Range[T]]) -> "MultiRange[T]":
        return cls(ranges)

    @classmethod
    def _from_canonical(cls, ranges: Iterable[Range[T]]) -> "MultiRange[T]":
        instance = cls.__new__(cls)
        instance._ranges = tuple(ranges)
        return instance

    @classmethod
    def empty(cls) -> "MultiRange[Any]":
        return cls._from_canonical(())

    @classmethod
    def universal(cls) -> "MultiRange[Any]":
        return cls._from_canonical((Range.create_unbounded(),))

    @property
    def ranges(self) -> tuple[Range[T], ...]:
        return self._ranges

    def __iter__(self) -> Iterator[Range[T]]:
        return iter(self._ranges)

    def __len__(self) -> int:
        return len(self._ranges)

    def __bool__(self) -> bool:
        return bool(self._ranges)

    def is_empty(self) -> bool:
        return not self._ranges

    def is_universal(self) -> bool:
        return len(self._ranges) == 1 and self._ranges[0].is_unbounded()

    def contains(self, value: T) -> bool:
        """Membership test by binary search on the lower edges."""
        if not self._ranges:
            return False
        # Only the first range can lack a lower edge
        lo = 1 if self._ranges[0].lower is None else 0
        idx = bisect.bisect_right(
            self._ranges,
            value,
            lo=lo,
            key=lambda r: r.lower.value,  # pyright: ignore[reportOptionalMemberAccess]
        )
        return any(
            self._ranges[i].contains(value) for i in (idx - 1, idx - 2) if i >= 0
        )

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # pyright: ignore[reportArgumentType]

    def union(self, other: "MultiRange[T]") -> "MultiRange[T]":
        return MultiRange(self._ranges + other._ranges)

    def intersection(self, other: "MultiRange[T]") -> "MultiRange[T]":
        """Two-cursor sweep over both sorted range lists.

        Each step intersects the current pair (the tighter edge wins on each
        side) and advances whichever range ends first. Intersecting two
        canonical lists cannot produce touching outputs, so no merge pass runs.
        """
        left, right = self._ranges, other._ranges
        out: list[Range[T]] = []
        i = j = 0
        while i < len(left) and j < len(right):
            a, b = left[i], right[j]
            lower = max_lower(a.lower, b.lower)
            upper = min_upper(a.upper, b.upper)
            if is_nonempty(lower, upper):
                out.append(Range(lower, upper))
            if compare_upper(a.upper, b.upper) <= 0:
                i += 1
            else:
                j += 1
        return MultiRange._from_canonical(out)

    def inverse(self) -> "MultiRange[T]":
        """Complement over the whole domain.

        Gaps take the flipped closure of the edges around them, so ``[1, 4)``
        inverts to ``(-∞, 1) ∪ [4, ∞)``.
        """
        if not self._ranges:
            return MultiRange.universal()

        gaps: list[Range[T]] = []
        first, last = self._ranges[0], self._ranges[-1]
        if first.lower is not None:
            gaps.append(Range(upper=first.lower.flip()))
        for prev, nxt in pairwise(self._ranges):
            # interior edges of a canonical list are always bounded
            assert prev.upper is not None and nxt.lower is not None
            gaps.append(Range(prev.upper.flip(), nxt.lower.flip()))
        if last.upper is not None:
            gaps.append(Range(lower=last.upper.flip()))
        return MultiRange._from_canonical(gaps)

    def difference(self, other: "MultiRange[T]") -> "MultiRange[T]":
        return self.intersection(other.inverse())

    def symmetric_difference(self, other: "MultiRange[T]") -> "MultiRange[T]":
        return self.difference(other).union(other.difference(self))

    def is_equivalent(self, other: "MultiRange[T]") -> bool:
        """Same set of values; structural because canonical form is unique."""
        return self._ranges == other._ranges

    def is_subset(self, other: "MultiRange[T]") -> bool:
        return self.difference(other).is_empty()

    def is_superset(self, other: "MultiRange[T]") -> bool:
        return other.is_subset(self)

    def overlaps(self, other: "MultiRange[T]") -> bool:
        return not self.intersection(other).is_empty()

    def __or__(self, other: "MultiRange[T] | Range[T]") -> "MultiRange[T]":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.union(coerced)

    def __and__(self, other: "MultiRange[T] | Range[T]") -> "MultiRange[T]":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.intersection(coerced)

    def __sub__(self, other: "MultiRange[T] | Range[T]") -> "MultiRange[T]":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.difference(coerced)

    def __xor__(self, other: "MultiRange[T] | Range[T]") -> "MultiRange[T]":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.symmetric_difference(coerced)

    def __rsub__(self, other: "Range[T]") -> "MultiRange[T]":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.difference(self)

    __ror__ = __or__
    __rand__ = __and__
    __rxor__ = __xor__

    def __invert__(self) -> "MultiRange[T]":
        return self.inverse()

    def __le__(self, other: "MultiRange[T]") -> bool:
        if not isinstance(other, MultiRange):
            return NotImplemented
        return self.is_subset(other)

    def __ge__(self, other: "MultiRange[T]") -> bool:
        if not isinstance(other, MultiRange):
            return NotImplemented
        return self.is_superset(other)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MultiRange):
            return NotImplemented
        return self.is_equivalent(other)

    @override
    def __hash__(self) -> int:
        return hash(self._ranges)

    @override
    def __str__(self) -> str:
        if not self._ranges:
            return EMPTY_SET
        return UNION_SEPARATOR.join(str(r) for r in self._ranges)

    @override
    def __repr__(self) -> str:
        return f"MultiRange({str(self)})"


def _coerce(item: Any) -> "MultiRange[Any] | None":
    if isinstance(item, MultiRange):
        return item
    if isinstance(item, Range):
        return item.to_multi_range()
    return None


def union(*items: "MultiRange[T] | Range[T]") -> "MultiRange[T]":
    """Compose multi-ranges with union semantics (equivalent to chaining `|`)."""

    if not items:
        raise ValueError(
            f"union() requires at least one range argument.\n"
            f"Example: union(schedule_a, schedule_b, schedule_c)"
        )

    ranges: list[Range[T]] = []
    for item in items:
        ranges.extend(_require(item, "union"))
    return MultiRange(ranges)


def intersection(*items: "MultiRange[T] | Range[T]") -> "MultiRange[T]":
    """Compose multi-ranges with intersection semantics (equivalent to chaining `&`)."""

    if not items:
        raise ValueError(
            f"intersection() requires at least one range argument.\n"
            f"Example: intersection(schedule_a, schedule_b, schedule_c)"
        )

    def reducer(acc: "MultiRange[T]", nxt: "MultiRange[T] | Range[T]"):
        return acc.intersection(_require(nxt, "intersection"))

    return reduce(reducer, items[1:], _require(items[0], "intersection"))


def _require(item: Any, name: str) -> "MultiRange[Any]":
    coerced = _coerce(item)
    if coerced is None:
        raise TypeError(
            f"{name}() arguments must be Range or MultiRange.\n"
            f"Got {type(item).__name__!r}: {item!r}\n"
            f"Hint: build ranges with Range.create(lower, INCLUSIVE, upper, EXCLUSIVE)"
        )
    return coerced
