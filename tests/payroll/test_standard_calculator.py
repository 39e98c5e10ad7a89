from datetime import date

import pytest

from src.attendance_payroll.attendance_payroll.payroll.calculator.standard_calculator import StandardSalaryCalculator
from src.attendance_payroll.attendance_payroll.payroll.model import PeriodTotals

START = date(2024, 3, 1)
END = date(2024, 3, 30)


def test_one_absence_over_thirty_days(new_employee):
    employee = new_employee(
        base_salary=3000.0,
        meal_allowance=500.0,
        bonus_percentage=10.0,
        base_bonus=200.0,
        penalties_value=40.0,
        violations_installment=60.0,
        medical_insurance=25.0,
        social_insurance=110.0,
        eid_bonus=0.0,
    )
    totals = PeriodTotals(total_days=30, total_work_days=25, total_absence_days=1, total_weekly_leave_days=4)

    report = StandardSalaryCalculator().calculate(employee, totals, start=START, end=END)

    assert report.daily_salary == 100
    assert report.hourly_rate == pytest.approx(100 / 9)
    assert report.meal_allowance == 450
    assert report.bonus == 20
    assert report.deductions_value == 100 + 40 + 60
    assert report.net_salary == pytest.approx(3000 + 450 + 0 + 20 + 0 - 25 - 110 - 200)


def test_overtime_and_fractional_deductions(new_employee):
    employee = new_employee(base_salary=2700.0, meal_allowance=500.0)
    totals = PeriodTotals(
        total_days=30,
        total_work_days=22,
        total_weekly_leave_days=4,
        total_annual_leave_days=2,
        total_official_leave_days=1,
        total_medical_leave_days=1,
        total_overtime=4.5,
        late_deduction_days=0.5,
        early_leave_deduction_days=0.25,
        medical_leave_deduction_days=0.25,
    )

    report = StandardSalaryCalculator().calculate(employee, totals, start=START, end=END)

    assert report.overtime_value == pytest.approx(4.5 * 10)
    assert report.meal_allowance == 500 - 4 * 50
    assert report.deductions_value == pytest.approx(90 * 1.0)
    assert report.net_salary == pytest.approx(2700 + 300 + 45 - 90)


def test_report_dict_is_rounded(new_employee):
    employee = new_employee(base_salary=1000.0)
    totals = PeriodTotals(total_days=30, total_work_days=26, total_weekly_leave_days=4, total_overtime=1.0)

    data = StandardSalaryCalculator().calculate(employee, totals, start=START, end=END).to_dict()

    assert data["daily_salary"] == 33.33
    assert data["overtime_value"] == 3.7
    assert data["start"] == "2024-03-01"
    assert data["total_work_days"] == 26
