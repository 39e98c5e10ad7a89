from datetime import date, datetime, time, timezone

import pytest

from src.attendance_payroll.attendance_payroll.common.datetime_utils import (
    FixedClock,
    coerce_instant,
    parse_iso_date,
)
from src.attendance_payroll.attendance_payroll.core.exceptions import InvalidTimestamp, ValidationError


def test_parse_iso_date():
    assert parse_iso_date("2024-03-04") == date(2024, 3, 4)
    with pytest.raises(ValidationError):
        parse_iso_date("04/03/2024")


def test_local_clock_string_is_anchored_on_day(tz):
    value = coerce_instant("09:30:00", date(2024, 3, 4), tz)

    assert value == datetime(2024, 3, 4, 9, 30, tzinfo=tz)


def test_short_clock_string_accepted(tz):
    assert coerce_instant("17:00", date(2024, 3, 4), tz) == datetime(2024, 3, 4, 17, 0, tzinfo=tz)


def test_iso_instant_with_zulu_suffix(tz):
    value = coerce_instant("2024-03-04T07:30:00Z", date(2024, 3, 4), tz)

    assert value == datetime(2024, 3, 4, 7, 30, tzinfo=timezone.utc)
    assert value.astimezone(tz).hour == 9


def test_naive_values_are_read_as_local(tz):
    day = date(2024, 3, 4)

    assert coerce_instant(datetime(2024, 3, 4, 8, 0), day, tz).tzinfo is tz
    assert coerce_instant(time(8, 0), day, tz) == datetime(2024, 3, 4, 8, 0, tzinfo=tz)


def test_blank_values_are_missing(tz):
    assert coerce_instant(None, date(2024, 3, 4), tz) is None
    assert coerce_instant("  ", date(2024, 3, 4), tz) is None


@pytest.mark.parametrize("raw", ["25:99", "2024-13-40T10:00:00", "soon"])
def test_garbage_raises_invalid_timestamp(raw, tz):
    with pytest.raises(InvalidTimestamp):
        coerce_instant(raw, date(2024, 3, 4), tz)


def test_fixed_clock_can_move(tz):
    clock = FixedClock(datetime(2024, 3, 1, 9, 0, tzinfo=tz))
    clock.set(datetime(2024, 4, 1, 9, 0, tzinfo=tz))

    assert clock.now().month == 4
