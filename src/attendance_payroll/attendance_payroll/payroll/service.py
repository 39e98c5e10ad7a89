from __future__ import annotations

from dataclasses import dataclass
from datetime import date, tzinfo
from typing import Optional, Sequence

from ..attendance.gap_filler import GapFiller
from ..attendance.model import DailyAttendanceRecord
from ..attendance.repository import AttendanceRecordRepository
from ..common.calendar import range_length
from ..common.locks import EmployeeLocks
from ..core.exceptions import EmployeeNotFound
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .aggregator import PeriodAggregator
from .calculator.base import SalaryCalculator
from .calculator.standard_calculator import StandardSalaryCalculator
from .model import PeriodSalaryReport


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]


class PayrollReportService:
    def __init__(
        self,
        records: AttendanceRecordRepository,
        employees: EmployeeRepository,
        *,
        tz: tzinfo,
        aggregator: Optional[PeriodAggregator] = None,
        calculator: Optional[SalaryCalculator] = None,
        gap_filler: Optional[GapFiller] = None,
        locks: Optional[EmployeeLocks] = None,
    ):
        self._records = records
        self._employees = employees
        self._tz = tz
        self._aggregator = aggregator or PeriodAggregator()
        self._calculator = calculator or StandardSalaryCalculator()
        self._gap_filler = gap_filler or GapFiller(records, tz)
        self._locks = locks or EmployeeLocks()

    def compute_salary_report(
        self,
        employee: Employee,
        records: Sequence[DailyAttendanceRecord],
        start: date,
        end: date,
    ) -> PeriodSalaryReport:
        totals = self._aggregator.aggregate(records, start, end)
        return self._calculator.calculate(employee, totals, start=start, end=end)

    def build_salary_report(self, code: str, start: date, end: date) -> PeriodSalaryReport:
        range_length(start, end)
        employee = self._employees.find_by_code(code)
        if employee is None:
            raise EmployeeNotFound(code)
        records = self._filled_records(employee, start, end)
        return self.compute_salary_report(employee, records, start, end)

    def build_salary_reports(self, start: date, end: date, *, code: Optional[str] = None) -> list[PeriodSalaryReport]:
        return [
            self.compute_salary_report(employee, self._filled_records(employee, start, end), start, end)
            for employee in self._select_employees(start, end, code)
        ]

    def build_attendance_report(self, *, start: date, end: date, code: Optional[str] = None) -> ReportData:
        """Gap-filled day rows plus per-employee period totals."""
        out_rows: list[dict] = []
        summary: list[dict] = []

        for employee in self._select_employees(start, end, code):
            records = self._filled_records(employee, start, end)
            for r in records:
                out_rows.append(self._to_row(employee, r))

            totals = self._aggregator.aggregate(records, start, end)
            summary.append(
                {
                    "code": employee.code,
                    "full_name": employee.full_name,
                    "monthly_late_allowance": employee.monthly_late_allowance,
                    "annual_leave_balance": employee.annual_leave_balance,
                    "total_annual_leave": employee.total_annual_leave,
                    **totals.to_dict(),
                }
            )

        out_rows.sort(key=lambda x: (x["day"], x["code"]))
        summary.sort(key=lambda x: x["code"])
        return ReportData(rows=out_rows, summary=summary)

    def _select_employees(self, start: date, end: date, code: Optional[str]) -> list[Employee]:
        range_length(start, end)
        if code is None:
            return list(self._employees.list_all())
        employee = self._employees.find_by_code(code)
        if employee is None:
            raise EmployeeNotFound(code)
        return [employee]

    def _filled_records(self, employee: Employee, start: date, end: date) -> list[DailyAttendanceRecord]:
        with self._locks.hold(employee.code):
            return self._gap_filler.fill(employee, start, end)

    def _to_row(self, employee: Employee, r: DailyAttendanceRecord) -> dict:
        return {
            "code": r.code,
            "full_name": employee.full_name,
            "day": r.day.strftime("%Y-%m-%d"),
            "status": r.status.value,
            "check_in": r.check_in.astimezone(self._tz).strftime("%H:%M:%S") if r.check_in else None,
            "check_out": r.check_out.astimezone(self._tz).strftime("%H:%M:%S") if r.check_out else None,
            "work_hours": round(r.work_hours, 2),
            "overtime": round(r.overtime, 2),
            "late_minutes": r.late_minutes,
            "late_deduction": r.late_deduction,
            "early_leave_deduction": r.early_leave_deduction,
            "medical_leave_deduction": r.medical_leave_deduction,
            "is_single_fingerprint": r.is_single_fingerprint,
            "work_days_per_week": r.work_days_per_week,
            "note": r.punch_error or "",
        }
