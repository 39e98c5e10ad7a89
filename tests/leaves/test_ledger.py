from dataclasses import replace
from datetime import date

from src.attendance_payroll.attendance_payroll.attendance.model import DailyAttendanceRecord
from src.attendance_payroll.attendance_payroll.core.enums import DayStatus
from src.attendance_payroll.attendance_payroll.leaves.ledger import LeaveLedger

MONDAY = date(2024, 3, 4)


def _day(status, applied=False):
    return DailyAttendanceRecord(code="1001", day=MONDAY, status=status, leave_balance_applied=applied)


def test_first_transition_into_annual_leave_grants(new_employee):
    employee = new_employee(annual_leave_balance=21, total_annual_leave=0)
    record, after = LeaveLedger().apply(None, _day(DayStatus.ANNUAL_LEAVE), employee)

    assert record.leave_balance_applied is True
    assert after.annual_leave_balance == 20
    assert after.total_annual_leave == 1


def test_saving_same_leave_again_changes_nothing(new_employee):
    employee = new_employee(annual_leave_balance=20, total_annual_leave=1)
    previous = _day(DayStatus.ANNUAL_LEAVE, applied=True)
    record, after = LeaveLedger().apply(previous, _day(DayStatus.ANNUAL_LEAVE), employee)

    assert record.leave_balance_applied is True
    assert after == employee


def test_switching_between_balance_statuses_keeps_single_grant(new_employee):
    employee = new_employee(annual_leave_balance=20, total_annual_leave=1)
    previous = _day(DayStatus.ANNUAL_LEAVE, applied=True)
    _, after = LeaveLedger().apply(previous, _day(DayStatus.LEAVE_COMPENSATION), employee)

    assert after == employee


def test_leaving_the_status_reverts(new_employee):
    employee = new_employee(annual_leave_balance=20, total_annual_leave=1)
    previous = _day(DayStatus.LEAVE_COMPENSATION, applied=True)
    record, after = LeaveLedger().apply(previous, _day(DayStatus.WORK), employee)

    assert record.leave_balance_applied is False
    assert after.annual_leave_balance == 21
    assert after.total_annual_leave == 0


def test_balance_and_total_are_floored_at_zero(new_employee):
    employee = new_employee(annual_leave_balance=0, total_annual_leave=0)
    _, granted = LeaveLedger().apply(None, _day(DayStatus.ANNUAL_LEAVE), employee)
    assert granted.annual_leave_balance == 0
    assert granted.total_annual_leave == 1

    _, reverted = LeaveLedger().apply(_day(DayStatus.ANNUAL_LEAVE, applied=True), _day(DayStatus.WORK), replace(employee))
    assert reverted.total_annual_leave == 0
    assert reverted.annual_leave_balance == 1


def test_release_on_delete(new_employee):
    employee = new_employee(annual_leave_balance=20, total_annual_leave=1)

    assert LeaveLedger().release(_day(DayStatus.ANNUAL_LEAVE, applied=True), employee).annual_leave_balance == 21
    assert LeaveLedger().release(_day(DayStatus.MEDICAL_LEAVE), employee) == employee
