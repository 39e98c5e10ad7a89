from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime, time, tzinfo
from typing import Optional, Union

from ..core.exceptions import InvalidTimestamp, ValidationError

InstantLike = Union[datetime, time, str, None]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date (expected YYYY-MM-DD): {value!r}")


def _parse_clock_time(value: str) -> time:
    for fmt in ("%H:%M:%S", "%H:%M"):
        try:
            return datetime.strptime(value, fmt).time()
        except ValueError:
            continue
    raise InvalidTimestamp(f"Invalid time (expected HH:mm:ss): {value!r}")


def coerce_instant(value: InstantLike, day: date, tz: tzinfo) -> Optional[datetime]:
    """Normalize a punch value to a timezone-aware instant.

    Accepts aware/naive datetimes, ``time`` objects, ISO-8601 instants and
    ``HH:mm[:ss]`` local-time strings (anchored on ``day``). Naive values are
    read as local time in ``tz``.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=tz)

    if isinstance(value, time):
        return datetime.combine(day, value, tzinfo=tz)

    if not isinstance(value, str):
        raise InvalidTimestamp(f"Unsupported timestamp type: {type(value)!r}")

    raw = value.strip()
    if not raw:
        return None

    if "T" not in raw and "-" not in raw:
        return datetime.combine(day, _parse_clock_time(raw), tzinfo=tz)

    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        raise InvalidTimestamp(f"Invalid ISO-8601 instant: {value!r}")
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=tz)


class Clock(ABC):
    """Injectable source of "now" so the engine never reads the wall clock directly."""

    @abstractmethod
    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock(Clock):
    def __init__(self, tz: tzinfo):
        self._tz = tz

    def now(self) -> datetime:
        return datetime.now(self._tz)


class FixedClock(Clock):
    """Test clock pinned to one instant (movable with ``set``)."""

    def __init__(self, instant: datetime):
        self._instant = instant

    def set(self, instant: datetime) -> None:
        self._instant = instant

    def now(self) -> datetime:
        return self._instant
