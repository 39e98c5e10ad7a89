from datetime import date, datetime

import pytest

from src.attendance_payroll.attendance_payroll.attendance.model import AttendanceEntry, StatusIntent
from src.attendance_payroll.attendance_payroll.attendance.resolver import StatusResolver
from src.attendance_payroll.attendance_payroll.core.enums import DayStatus
from src.attendance_payroll.attendance_payroll.core.exceptions import ConflictingStatus

MONDAY = date(2024, 3, 4)


def _resolve(tz, employee, **entry_fields):
    entry = AttendanceEntry(code=employee.code, day=entry_fields.pop("day", MONDAY), **entry_fields)
    return StatusResolver(tz).resolve(entry, employee)


def test_full_day_clamps_hours_and_keeps_overtime(tz, new_employee):
    resolution = _resolve(tz, new_employee(work_days_per_week=5), check_in="08:40:00", check_out="17:00:00")
    record = resolution.record

    assert resolution.penalties_apply is True
    assert record.status == DayStatus.WORK
    assert record.work_hours == 8
    assert record.overtime == pytest.approx(1 / 3)
    assert record.is_single_fingerprint is False
    assert record.work_days_per_week == 5


def test_reversed_punches_give_zero_hours(tz, new_employee):
    record = _resolve(tz, new_employee(), check_in="17:00:00", check_out="09:00:00").record

    assert record.work_hours == 0
    assert record.overtime == 0


def test_single_punch(tz, new_employee):
    resolution = _resolve(tz, new_employee(), check_in="08:30:00")

    assert resolution.record.is_single_fingerprint is True
    assert resolution.record.work_hours == 0
    assert resolution.record.check_in == datetime(2024, 3, 4, 8, 30, tzinfo=tz)
    assert resolution.penalties_apply is True


def test_no_punch_is_absence(tz, new_employee):
    resolution = _resolve(tz, new_employee())

    assert resolution.record.absence is True
    assert resolution.record.early_leave_deduction == 1
    assert resolution.penalties_apply is False


def test_weekly_off_drops_punches(tz, new_employee):
    record = _resolve(tz, new_employee(), day=date(2024, 3, 8), check_in="09:00:00", check_out="17:00:00").record

    assert record.weekly_off is True
    assert record.check_in is None
    assert record.work_hours == 0


def test_annual_leave_is_canonical_day(tz, new_employee):
    record = _resolve(tz, new_employee(), intent=StatusIntent(annual_leave=True), check_in="11:00:00").record

    assert record.annual_leave is True
    assert record.check_in == datetime(2024, 3, 4, 8, 30, tzinfo=tz)
    assert record.check_out == datetime(2024, 3, 4, 17, 30, tzinfo=tz)
    assert record.work_hours == 8
    assert record.late_minutes == 0


def test_medical_leave_carries_quarter_day(tz, new_employee):
    record = _resolve(tz, new_employee(), intent=StatusIntent(medical_leave=True)).record

    assert record.medical_leave is True
    assert record.medical_leave_deduction == 0.25
    assert record.early_leave_deduction == 0


def test_official_leave_on_weekly_off_day_stays_leave(tz, new_employee):
    record = _resolve(tz, new_employee(), day=date(2024, 3, 8), intent=StatusIntent(official_leave=True)).record

    assert record.official_leave is True
    assert record.weekly_off is False


def test_absence_intent_discards_punches(tz, new_employee):
    record = _resolve(tz, new_employee(), intent=StatusIntent(absence=True), check_in="08:30:00").record

    assert record.absence is True
    assert record.check_in is None


def test_conflicting_flags_rejected(tz, new_employee):
    with pytest.raises(ConflictingStatus):
        _resolve(tz, new_employee(), intent=StatusIntent(annual_leave=True, medical_leave=True))


def test_unparseable_punch_degrades_without_raising(tz, new_employee, caplog):
    resolution = _resolve(tz, new_employee(), check_in="08:30:00", check_out="not-a-time")
    record = resolution.record

    assert record.status == DayStatus.WORK
    assert record.check_in is None and record.check_out is None
    assert record.work_hours == 0
    assert record.punch_error
    assert record.absence is False
    assert resolution.penalties_apply is False
    assert "Invalid punch" in caplog.text
