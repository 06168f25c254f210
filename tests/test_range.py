from dataclasses import FrozenInstanceError

import pytest

from frange import EXCLUSIVE, INCLUSIVE, Bound, BoundType, InvalidRangeError, Range
from frange.bound import compare_lower, compare_upper, max_lower, min_upper
from frange.range import touches_or_overlaps


def test_bounded_range_queries() -> None:
    rng = Range.create(1, INCLUSIVE, 3, INCLUSIVE)

    assert rng.has_lower_bound()
    assert rng.has_upper_bound()
    assert rng.lower_bound_value() == 1
    assert rng.lower_bound_type() is BoundType.INCLUSIVE
    assert rng.upper_bound_value() == 3
    assert rng.upper_bound_type() is BoundType.INCLUSIVE


def test_half_bounded_ranges() -> None:
    above = Range.create_lower(4, INCLUSIVE)
    below = Range.create_upper(1, EXCLUSIVE)

    assert above.has_lower_bound() and not above.has_upper_bound()
    assert below.has_upper_bound() and not below.has_lower_bound()
    assert below.upper_bound_type() is BoundType.EXCLUSIVE


def test_missing_bound_value_raises() -> None:
    above = Range.create_lower(4, INCLUSIVE)

    with pytest.raises(ValueError, match="no upper bound"):
        above.upper_bound_value()
    with pytest.raises(ValueError, match="no upper bound"):
        above.upper_bound_type()


def test_unbounded_range_covers_everything() -> None:
    everything = Range.create_unbounded()

    assert everything.is_unbounded()
    assert everything.contains(-(10**9))
    assert everything.contains(10**9)
    assert everything.contains(0.5)


def test_single_point_range() -> None:
    point = Range.create(5, INCLUSIVE, 5, INCLUSIVE)

    assert point.contains(5)
    assert not point.contains(4.999)
    assert not point.contains(5.001)


@pytest.mark.parametrize(
    "lower_type, upper_type",
    [
        (EXCLUSIVE, EXCLUSIVE),
        (INCLUSIVE, EXCLUSIVE),
        (EXCLUSIVE, INCLUSIVE),
    ],
)
def test_equal_bounds_must_both_be_inclusive(
    lower_type: BoundType, upper_type: BoundType
) -> None:
    with pytest.raises(InvalidRangeError, match="inclusive on both sides"):
        Range.create(5, lower_type, 5, upper_type)


def test_inverted_bounds_raise() -> None:
    with pytest.raises(InvalidRangeError) as excinfo:
        Range.create(3, INCLUSIVE, 1, INCLUSIVE)

    assert excinfo.value.lower == Bound(3, INCLUSIVE)
    assert excinfo.value.upper == Bound(1, INCLUSIVE)
    assert "3" in str(excinfo.value) and "1" in str(excinfo.value)


def test_invalid_range_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        Range(Bound(2, EXCLUSIVE), Bound(2, EXCLUSIVE))


def test_bound_rejects_non_bound_type() -> None:
    with pytest.raises(TypeError, match="BoundType"):
        Bound(1, "inclusive")  # pyright: ignore[reportArgumentType]


def test_ranges_are_immutable() -> None:
    rng = Range.create(1, INCLUSIVE, 3, INCLUSIVE)

    with pytest.raises(FrozenInstanceError):
        rng.lower = None  # pyright: ignore[reportAttributeAccessIssue]


def test_contains_respects_closures() -> None:
    half_open = Range.create(1, INCLUSIVE, 4, EXCLUSIVE)
    open_range = Range.create(1, EXCLUSIVE, 4, EXCLUSIVE)

    assert half_open.contains(1)
    assert not half_open.contains(4)
    assert not open_range.contains(1)
    assert open_range.contains(2)
    assert 3.5 in open_range
    assert 0 not in open_range


def test_contains_with_string_domain() -> None:
    volume = Range.create("apple", INCLUSIVE, "mango", EXCLUSIVE)

    assert volume.contains("banana")
    assert volume.contains("apple")
    assert not volume.contains("mango")
    assert not volume.contains("zebra")


def test_range_rendering() -> None:
    assert str(Range.create(1, INCLUSIVE, 3, INCLUSIVE)) == "[1, 3]"
    assert str(Range.create(2, EXCLUSIVE, 4, EXCLUSIVE)) == "(2, 4)"
    assert str(Range.create_upper(1, EXCLUSIVE)) == "(-∞, 1)"
    assert str(Range.create_lower(4, INCLUSIVE)) == "[4, ∞)"
    assert str(Range.create_unbounded()) == "(-∞, ∞)"


def test_to_multi_range_wraps_single_range() -> None:
    rng = Range.create(1, INCLUSIVE, 3, INCLUSIVE)

    assert rng.to_multi_range().ranges == (rng,)


class TestTouchesOrOverlaps:
    def test_shared_inclusive_edge_touches(self) -> None:
        left = Range.create(1, INCLUSIVE, 2, EXCLUSIVE)
        right = Range.create(2, INCLUSIVE, 3, INCLUSIVE)

        assert touches_or_overlaps(left, right)
        assert touches_or_overlaps(right, left)

    def test_both_exclusive_leaves_gap(self) -> None:
        left = Range.create(1, INCLUSIVE, 2, EXCLUSIVE)
        right = Range.create(2, EXCLUSIVE, 3, INCLUSIVE)

        assert not touches_or_overlaps(left, right)
        assert not touches_or_overlaps(right, left)

    def test_overlap_by_value(self) -> None:
        left = Range.create(1, INCLUSIVE, 5, EXCLUSIVE)
        right = Range.create(3, EXCLUSIVE, 9, INCLUSIVE)

        assert touches_or_overlaps(left, right)

    def test_disjoint(self) -> None:
        left = Range.create(1, INCLUSIVE, 2, INCLUSIVE)
        right = Range.create(3, INCLUSIVE, 4, INCLUSIVE)

        assert not touches_or_overlaps(left, right)

    def test_unbounded_sides(self) -> None:
        below = Range.create_upper(0, INCLUSIVE)
        above = Range.create_lower(10, INCLUSIVE)

        assert not touches_or_overlaps(below, above)
        assert touches_or_overlaps(below, Range.create_unbounded())


class TestBoundOrdering:
    def test_lower_inclusive_sorts_first(self) -> None:
        assert compare_lower(Bound(1, INCLUSIVE), Bound(1, EXCLUSIVE)) == -1
        assert compare_lower(Bound(1, EXCLUSIVE), Bound(1, INCLUSIVE)) == 1
        assert compare_lower(Bound(1, EXCLUSIVE), Bound(2, INCLUSIVE)) == -1

    def test_upper_exclusive_sorts_first(self) -> None:
        assert compare_upper(Bound(1, EXCLUSIVE), Bound(1, INCLUSIVE)) == -1
        assert compare_upper(Bound(1, INCLUSIVE), Bound(1, EXCLUSIVE)) == 1
        assert compare_upper(Bound(2, EXCLUSIVE), Bound(1, INCLUSIVE)) == 1

    def test_unbounded_extremes(self) -> None:
        assert compare_lower(None, Bound(-(10**9), INCLUSIVE)) == -1
        assert compare_lower(None, None) == 0
        assert compare_upper(Bound(10**9, INCLUSIVE), None) == -1
        assert compare_upper(None, None) == 0

    def test_narrowing_picks_exclusive(self) -> None:
        assert max_lower(Bound(2, INCLUSIVE), Bound(2, EXCLUSIVE)) == Bound(2, EXCLUSIVE)
        assert min_upper(Bound(3, INCLUSIVE), Bound(3, EXCLUSIVE)) == Bound(3, EXCLUSIVE)
        assert max_lower(None, Bound(2, INCLUSIVE)) == Bound(2, INCLUSIVE)
        assert min_upper(None, Bound(3, INCLUSIVE)) == Bound(3, INCLUSIVE)

    def test_flip(self) -> None:
        assert Bound(1, INCLUSIVE).flip() == Bound(1, EXCLUSIVE)
        assert BoundType.EXCLUSIVE.flip() is BoundType.INCLUSIVE
