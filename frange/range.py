from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic

from frange.bound import (
    Bound,
    BoundType,
    T,
    compare_lower,
    is_nonempty,
    reaches,
)
from frange.util import NEG_INFINITY, POS_INFINITY

if TYPE_CHECKING:
    from frange.core import MultiRange


class InvalidRangeError(ValueError):
    """Raised when a range's bounds describe an empty or inverted interval."""

    def __init__(self, lower: Bound[Any], upper: Bound[Any]):
        self.lower: Bound[Any] = lower
        self.upper: Bound[Any] = upper
        if not upper.value < lower.value:
            problem = (
                f"Range with equal bounds ({lower.value!r}) must be inclusive on "
                f"both sides.\n"
                f"Got lower={lower.type.value}, upper={upper.type.value}, which "
                f"contains no values.\n"
                f"Hint: use Range.create(v, INCLUSIVE, v, INCLUSIVE) for a single point"
            )
        else:
            problem = (
                f"Range lower bound ({lower.value!r}) must be <= upper bound "
                f"({upper.value!r}).\n"
                f"Hint: swap the arguments to Range.create()"
            )
        super().__init__(problem)


@dataclass(frozen=True)
class Range(Generic[T]):
    """One contiguous interval; ``None`` on either side means unbounded."""

    lower: Bound[T] | None = None
    upper: Bound[T] | None = None

    def __post_init__(self) -> None:
        if self.lower is None or self.upper is None:
            return
        if not is_nonempty(self.lower, self.upper):
            raise InvalidRangeError(self.lower, self.upper)

    @classmethod
    def create(
        cls, lower: T, lower_type: BoundType, upper: T, upper_type: BoundType
    ) -> "Range[T]":
        return cls(Bound(lower, lower_type), Bound(upper, upper_type))

    @classmethod
    def create_lower(cls, value: T, type: BoundType) -> "Range[T]":
        """Range from ``value`` upward with no upper bound."""
        return cls(lower=Bound(value, type))

    @classmethod
    def create_upper(cls, value: T, type: BoundType) -> "Range[T]":
        """Range from nothing up to ``value`` with no lower bound."""
        return cls(upper=Bound(value, type))

    @classmethod
    def create_unbounded(cls) -> "Range[Any]":
        return cls()

    def has_lower_bound(self) -> bool:
        return self.lower is not None

    def has_upper_bound(self) -> bool:
        return self.upper is not None

    def is_unbounded(self) -> bool:
        return self.lower is None and self.upper is None

    def lower_bound_value(self) -> T:
        return self._require("lower").value

    def lower_bound_type(self) -> BoundType:
        return self._require("lower").type

    def upper_bound_value(self) -> T:
        return self._require("upper").value

    def upper_bound_type(self) -> BoundType:
        return self._require("upper").type

    def _require(self, side: str) -> Bound[T]:
        bound = self.lower if side == "lower" else self.upper
        if bound is None:
            raise ValueError(
                f"Range {self} has no {side} bound.\n"
                f"Hint: check has_{side}_bound() before reading it"
            )
        return bound

    def contains(self, value: T) -> bool:
        lower, upper = self.lower, self.upper
        if lower is not None:
            if value < lower.value:
                return False
            # equal to an exclusive lower edge
            if not lower.inclusive and not lower.value < value:
                return False
        if upper is not None:
            if upper.value < value:
                return False
            if not upper.inclusive and not value < upper.value:
                return False
        return True

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # pyright: ignore[reportArgumentType]

    def to_multi_range(self) -> "MultiRange[T]":
        from frange.core import MultiRange

        return MultiRange((self,))

    def __str__(self) -> str:
        """Interval notation, e.g. ``[1, 3)`` or ``(-∞, 4]``."""
        if self.lower is None:
            left = f"({NEG_INFINITY}"
        else:
            left = ("[" if self.lower.inclusive else "(") + str(self.lower.value)
        if self.upper is None:
            right = f"{POS_INFINITY})"
        else:
            right = str(self.upper.value) + ("]" if self.upper.inclusive else ")")
        return f"{left}, {right}"


def touches_or_overlaps(a: Range[T], b: Range[T]) -> bool:
    """True when ``a`` and ``b`` share a value or abut with no gap between them."""
    if compare_lower(a.lower, b.lower) > 0:
        a, b = b, a
    return reaches(a.upper, b.lower)
