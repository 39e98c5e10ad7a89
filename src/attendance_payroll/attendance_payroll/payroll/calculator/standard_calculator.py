from __future__ import annotations

from datetime import date

from .base import SalaryCalculator
from ...core.constants import MEAL_ALLOWANCE_CUT_PER_LEAVE_DAY, PAID_HOURS_PER_DAY, SALARY_DAYS_PER_MONTH
from ...employees.model import Employee
from ..model import PeriodSalaryReport, PeriodTotals


class StandardSalaryCalculator(SalaryCalculator):
    """Standard rule: 30-day month, 9 paid hours a day, 50 off the meal allowance per day away."""

    def calculate(self, employee: Employee, totals: PeriodTotals, *, start: date, end: date) -> PeriodSalaryReport:
        daily_salary = employee.base_salary / SALARY_DAYS_PER_MONTH
        hourly_rate = daily_salary / PAID_HOURS_PER_DAY

        overtime_value = totals.total_overtime * hourly_rate
        meal_allowance = employee.meal_allowance - MEAL_ALLOWANCE_CUT_PER_LEAVE_DAY * totals.paid_leave_days
        bonus = employee.base_bonus * employee.bonus_percentage / 100

        deducted_days = (
            totals.total_absence_days
            + totals.late_deduction_days
            + totals.early_leave_deduction_days
            + totals.medical_leave_deduction_days
        )
        deductions_value = daily_salary * deducted_days + employee.penalties_value + employee.violations_installment

        net_salary = (
            employee.base_salary
            + meal_allowance
            + overtime_value
            + bonus
            + employee.eid_bonus
            - employee.medical_insurance
            - employee.social_insurance
            - deductions_value
        )

        return PeriodSalaryReport(
            code=employee.code,
            full_name=employee.full_name,
            department=employee.department,
            start=start,
            end=end,
            totals=totals,
            base_salary=employee.base_salary,
            daily_salary=daily_salary,
            hourly_rate=hourly_rate,
            overtime_value=overtime_value,
            meal_allowance=meal_allowance,
            bonus=bonus,
            eid_bonus=employee.eid_bonus,
            medical_insurance=employee.medical_insurance,
            social_insurance=employee.social_insurance,
            penalties_value=employee.penalties_value,
            violations_installment=employee.violations_installment,
            deductions_value=deductions_value,
            net_salary=net_salary,
            annual_leave_balance=employee.annual_leave_balance,
            total_annual_leave=employee.total_annual_leave,
        )
