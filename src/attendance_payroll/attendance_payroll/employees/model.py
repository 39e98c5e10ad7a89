from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.constants import (
    DEFAULT_MEAL_ALLOWANCE,
    DEFAULT_MONTHLY_LATE_ALLOWANCE,
    DEFAULT_WORK_DAYS_PER_WEEK,
)


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee's payroll profile and running balances.

    Note: This is a plain data object (no DB access). Engine steps return
    updated copies via ``dataclasses.replace`` instead of mutating it.
    """

    code: str
    full_name: str
    base_salary: float
    base_bonus: float = 0.0
    bonus_percentage: float = 0.0
    meal_allowance: float = DEFAULT_MEAL_ALLOWANCE
    medical_insurance: float = 0.0
    social_insurance: float = 0.0
    eid_bonus: float = 0.0
    penalties_value: float = 0.0
    violations_installment: float = 0.0
    work_days_per_week: int = DEFAULT_WORK_DAYS_PER_WEEK
    annual_leave_balance: int = 21
    total_annual_leave: int = 0
    monthly_late_allowance: int = DEFAULT_MONTHLY_LATE_ALLOWANCE
    last_reset_date: Optional[date] = None
    department: Optional[str] = None
