from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from ...employees.model import Employee
from ..model import PeriodSalaryReport, PeriodTotals


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(self, employee: Employee, totals: PeriodTotals, *, start: date, end: date) -> PeriodSalaryReport:
        raise NotImplementedError
