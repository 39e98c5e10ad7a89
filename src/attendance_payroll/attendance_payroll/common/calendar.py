"""Calendar helpers anchored on the organization timezone.

Every weekday/day-boundary decision in the engine goes through this module so
that a single configured zone drives all calendar reasoning.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, tzinfo
from typing import Iterator, Union

from ..core.constants import SUPPORTED_WORK_WEEKS
from ..core.exceptions import InvalidRange, ValidationError

# ISO weekday numbers
FRIDAY = 5
SATURDAY = 6

_WEEKLY_OFF_DAYS = {
    5: frozenset({FRIDAY, SATURDAY}),
    6: frozenset({FRIDAY}),
}


def local_day(value: Union[date, datetime], tz: tzinfo) -> date:
    """Calendar day of ``value`` in ``tz`` (plain dates pass through)."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.date()
        return value.astimezone(tz).date()
    return value


def at_local_time(day: date, clock_time: time, tz: tzinfo) -> datetime:
    return datetime.combine(day, clock_time, tzinfo=tz)


def is_weekly_off(value: Union[date, datetime], work_days_per_week: int, tz: tzinfo) -> bool:
    if work_days_per_week not in SUPPORTED_WORK_WEEKS:
        raise ValidationError(f"Unsupported work week: {work_days_per_week}")
    return local_day(value, tz).isoweekday() in _WEEKLY_OFF_DAYS[work_days_per_week]


def days_in_range(start: date, end: date) -> Iterator[date]:
    if end < start:
        raise InvalidRange(f"Range end {end.isoformat()} is before start {start.isoformat()}")
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def range_length(start: date, end: date) -> int:
    if end < start:
        raise InvalidRange(f"Range end {end.isoformat()} is before start {start.isoformat()}")
    return (end - start).days + 1


def month_anchor(value: date) -> date:
    return value.replace(day=1)
