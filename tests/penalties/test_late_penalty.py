from dataclasses import replace
from datetime import date, datetime

import pytest

from src.attendance_payroll.attendance_payroll.attendance.model import DailyAttendanceRecord
from src.attendance_payroll.attendance_payroll.core.enums import DayStatus
from src.attendance_payroll.attendance_payroll.penalties.late import LatePenaltyCalculator

MONDAY = date(2024, 3, 4)


def _worked(tz, check_in):
    hour, minute = check_in
    return DailyAttendanceRecord(
        code="1001",
        day=MONDAY,
        status=DayStatus.WORK,
        check_in=datetime(2024, 3, 4, hour, minute, tzinfo=tz),
        check_out=datetime(2024, 3, 4, 17, 30, tzinfo=tz),
    )


def test_grace_period_records_nothing(tz, new_employee):
    employee = new_employee()
    record, after = LatePenaltyCalculator(tz).apply(_worked(tz, (8, 40)), employee)

    assert record.late_minutes == 0
    assert record.late_deduction == 0
    assert after == employee


def test_on_time(tz, new_employee):
    record, _ = LatePenaltyCalculator(tz).apply(_worked(tz, (8, 15)), new_employee())

    assert record.late_minutes == 0


def test_late_within_allowance(tz, new_employee):
    record, after = LatePenaltyCalculator(tz).apply(_worked(tz, (9, 30)), new_employee(monthly_late_allowance=120))

    assert record.late_minutes == 60
    assert record.late_deduction == 0
    assert record.allowance_minutes_consumed == 60
    assert record.allowance_period == date(2024, 3, 1)
    assert after.monthly_late_allowance == 60


def test_late_beyond_allowance(tz, new_employee):
    record, after = LatePenaltyCalculator(tz).apply(_worked(tz, (9, 30)), new_employee(monthly_late_allowance=30))

    assert record.late_minutes == 60
    assert record.late_deduction == 0.25
    assert record.allowance_minutes_consumed == 30
    assert after.monthly_late_allowance == 0


def test_exactly_at_late_limit_is_charged(tz, new_employee):
    record, after = LatePenaltyCalculator(tz).apply(_worked(tz, (9, 15)), new_employee())

    assert record.late_minutes == 45
    assert after.monthly_late_allowance == 75


@pytest.mark.parametrize("allowance", [0, 120])
def test_past_threshold_ignores_allowance(tz, new_employee, allowance):
    employee = new_employee(monthly_late_allowance=allowance)
    record, after = LatePenaltyCalculator(tz).apply(_worked(tz, (11, 30)), employee)

    assert record.late_minutes == 180
    assert record.late_deduction == 0.5
    assert record.allowance_minutes_consumed == 0
    assert after.monthly_late_allowance == allowance


def test_skips_days_without_check_in(tz, new_employee):
    record = replace(_worked(tz, (10, 0)), check_in=None)
    out, after = LatePenaltyCalculator(tz).apply(record, new_employee())

    assert out.late_minutes == 0
    assert after.monthly_late_allowance == 120


def test_as_of_in_new_month_resets_before_charging(tz, new_employee):
    employee = new_employee(monthly_late_allowance=5, last_reset_date=date(2024, 2, 1))
    record, after = LatePenaltyCalculator(tz).apply(
        _worked(tz, (9, 30)),
        employee,
        as_of=datetime(2024, 3, 4, 18, 0, tzinfo=tz),
    )

    assert record.late_deduction == 0
    assert after.monthly_late_allowance == 60
    assert after.last_reset_date == date(2024, 3, 1)
