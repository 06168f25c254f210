"""Wall-clock helpers for building ranges of datetimes from strings.

Parsing is delegated to python-dateutil, so inputs such as ``"9am"``,
``"11:30am"`` or ``"2025-01-06 14:30"`` are all accepted.

Example:
    >>> from datetime import date
    >>> from frange.times import schedule, span
    >>>
    >>> day = span("9am", "5pm", on=date(2025, 1, 6)).to_multi_range()
    >>> busy = schedule(("10am", "11am"), ("11am", "3pm"), on=date(2025, 1, 6))
    >>> free = day - busy
"""

from datetime import date, datetime, time
from zoneinfo import ZoneInfo

from dateutil import parser

from frange.bound import BoundType
from frange.core import MultiRange
from frange.range import Range


def at(text: str, *, on: date | None = None, tz: str | None = None) -> datetime:
    """Parse ``text`` into a datetime.

    Args:
        text: Time or date-time string; missing date fields come from ``on``
        on: Day to place bare times on (defaults to today)
        tz: IANA timezone name attached to naive results (e.g., "US/Pacific")

    Raises:
        dateutil.parser.ParserError: If ``text`` is not a recognizable time
    """
    default = datetime.combine(on if on is not None else date.today(), time.min)
    parsed = parser.parse(text, default=default)
    if tz is not None and parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=ZoneInfo(tz))
    return parsed


def span(
    start: str, end: str, *, on: date | None = None, tz: str | None = None
) -> Range[datetime]:
    """Half-open ``[start, end)`` range between two parsed times."""
    return Range.create(
        at(start, on=on, tz=tz),
        BoundType.INCLUSIVE,
        at(end, on=on, tz=tz),
        BoundType.EXCLUSIVE,
    )


def schedule(
    *spans: tuple[str, str], on: date | None = None, tz: str | None = None
) -> MultiRange[datetime]:
    """Canonical union of ``(start, end)`` string pairs, each half-open."""
    return MultiRange(span(start, end, on=on, tz=tz) for start, end in spans)
