from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from zoneinfo import ZoneInfo

import pytest

from src.attendance_payroll.attendance_payroll.attendance.service import AttendanceService
from src.attendance_payroll.attendance_payroll.common.datetime_utils import FixedClock
from src.attendance_payroll.attendance_payroll.employees.model import Employee

CAIRO = ZoneInfo("Africa/Cairo")


class FakeEmployeesRepo:
    def __init__(self, employees=()):
        self._by_code = {e.code: e for e in employees}
        self.saves = 0

    def find_by_code(self, code):
        return self._by_code.get(code)

    def list_all(self):
        return [self._by_code[c] for c in sorted(self._by_code)]

    def save(self, employee):
        self.saves += 1
        self._by_code[employee.code] = employee


class FailingEmployeesRepo(FakeEmployeesRepo):
    def save(self, employee):
        raise RuntimeError("employees table is read-only")


class FakeRecordsRepo:
    def __init__(self, records=()):
        self._rows = {(r.code, r.day): r for r in records}
        self.upserts = 0

    def find_by_employee_and_day(self, code, day):
        return self._rows.get((code, day))

    def find_by_employee_and_range(self, code, start, end):
        return sorted(
            (r for (c, d), r in self._rows.items() if c == code and start <= d <= end),
            key=lambda r: r.day,
        )

    def upsert(self, record):
        self.upserts += 1
        created = (record.code, record.day) not in self._rows
        self._rows[(record.code, record.day)] = record
        return created

    def delete(self, code, day):
        return self._rows.pop((code, day), None) is not None

    def delete_all(self):
        count = len(self._rows)
        self._rows.clear()
        return count

    def all(self):
        return list(self._rows.values())


def make_employee(**overrides) -> Employee:
    base = Employee(
        code="1001",
        full_name="Mona Adel",
        base_salary=3000.0,
        work_days_per_week=6,
        last_reset_date=date(2024, 3, 1),
    )
    return replace(base, **overrides)


@pytest.fixture
def tz():
    return CAIRO


@pytest.fixture
def clock():
    return FixedClock(datetime(2024, 3, 15, 12, 0, tzinfo=CAIRO))


@pytest.fixture
def employees_repo():
    return FakeEmployeesRepo([make_employee()])


@pytest.fixture
def records_repo():
    return FakeRecordsRepo()


@pytest.fixture
def service(records_repo, employees_repo, clock):
    return AttendanceService(records_repo, employees_repo, tz=CAIRO, clock=clock)


@pytest.fixture
def new_employee():
    return make_employee


@pytest.fixture
def failing_employees_repo():
    return FailingEmployeesRepo([make_employee()])
