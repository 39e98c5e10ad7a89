from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class PeriodTotals:
    """Day counts and sums over a range of daily records."""

    total_days: int
    total_work_days: int = 0
    total_absence_days: int = 0
    total_weekly_leave_days: int = 0
    total_annual_leave_days: int = 0
    total_medical_leave_days: int = 0
    total_official_leave_days: int = 0
    total_leave_compensation_days: int = 0
    total_work_hours: float = 0.0
    total_overtime: float = 0.0
    late_deduction_days: float = 0.0
    early_leave_deduction_days: float = 0.0
    medical_leave_deduction_days: float = 0.0
    total_late_days: int = 0

    @property
    def category_days(self) -> int:
        return (
            self.total_work_days
            + self.total_absence_days
            + self.total_weekly_leave_days
            + self.total_annual_leave_days
            + self.total_medical_leave_days
            + self.total_official_leave_days
            + self.total_leave_compensation_days
        )

    @property
    def paid_leave_days(self) -> int:
        """Days without a meal: absences plus every leave type."""
        return (
            self.total_absence_days
            + self.total_annual_leave_days
            + self.total_medical_leave_days
            + self.total_official_leave_days
            + self.total_leave_compensation_days
        )

    def to_dict(self) -> dict:
        data = asdict(self)
        for key in (
            "total_work_hours",
            "total_overtime",
            "late_deduction_days",
            "early_leave_deduction_days",
            "medical_leave_deduction_days",
        ):
            data[key] = round(data[key], 2)
        return data


@dataclass(frozen=True)
class PeriodSalaryReport:
    """Salary of one employee over ``[start, end]``. Computed, never persisted.

    Values are kept unrounded; ``to_dict`` is the presentation form.
    """

    code: str
    full_name: str
    department: Optional[str]
    start: date
    end: date
    totals: PeriodTotals
    base_salary: float
    daily_salary: float
    hourly_rate: float
    overtime_value: float
    meal_allowance: float
    bonus: float
    eid_bonus: float
    medical_insurance: float
    social_insurance: float
    penalties_value: float
    violations_installment: float
    deductions_value: float
    net_salary: float
    annual_leave_balance: int
    total_annual_leave: int

    def to_dict(self) -> dict:
        money = {
            key: round(getattr(self, key), 2)
            for key in (
                "base_salary",
                "daily_salary",
                "hourly_rate",
                "overtime_value",
                "meal_allowance",
                "bonus",
                "eid_bonus",
                "medical_insurance",
                "social_insurance",
                "penalties_value",
                "violations_installment",
                "deductions_value",
                "net_salary",
            )
        }
        return {
            "code": self.code,
            "full_name": self.full_name,
            "department": self.department,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            **self.totals.to_dict(),
            **money,
            "annual_leave_balance": self.annual_leave_balance,
            "total_annual_leave": self.total_annual_leave,
        }
