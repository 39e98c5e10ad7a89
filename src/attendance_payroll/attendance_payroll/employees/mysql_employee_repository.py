from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..common.validators import require_non_empty, require_non_negative, require_percentage, require_work_week
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = """
    code, full_name, department, base_salary, base_bonus, bonus_percentage, meal_allowance,
    medical_insurance, social_insurance, eid_bonus, penalties_value, violations_installment,
    work_days_per_week, annual_leave_balance, total_annual_leave, monthly_late_allowance,
    last_reset_date
"""


def _row_to_employee(row: Dict[str, Any]) -> Employee:
    return Employee(
        code=require_non_empty(row["code"], "code"),
        full_name=row["full_name"],
        department=row.get("department"),
        base_salary=float(row["base_salary"]),
        base_bonus=float(row.get("base_bonus") or 0),
        bonus_percentage=require_percentage(float(row.get("bonus_percentage") or 0), "bonus_percentage"),
        meal_allowance=float(row["meal_allowance"]),
        medical_insurance=float(row.get("medical_insurance") or 0),
        social_insurance=float(row.get("social_insurance") or 0),
        eid_bonus=float(row.get("eid_bonus") or 0),
        penalties_value=float(row.get("penalties_value") or 0),
        violations_installment=float(row.get("violations_installment") or 0),
        work_days_per_week=require_work_week(int(row["work_days_per_week"])),
        annual_leave_balance=int(require_non_negative(row["annual_leave_balance"], "annual_leave_balance")),
        total_annual_leave=int(require_non_negative(row["total_annual_leave"], "total_annual_leave")),
        monthly_late_allowance=int(require_non_negative(row["monthly_late_allowance"], "monthly_late_allowance")),
        last_reset_date=row.get("last_reset_date"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_by_code(self, code: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE code=%s", (code,))
            row = fetchone(cur)
            return _row_to_employee(row) if row else None

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY code ASC")
            return [_row_to_employee(r) for r in fetchall(cur)]

    def save(self, employee: Employee) -> None:
        # Only the balances move while processing attendance; profile fields are owned elsewhere.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET annual_leave_balance=%s, total_annual_leave=%s,
                    monthly_late_allowance=%s, last_reset_date=%s
                WHERE code=%s
                """,
                (
                    int(employee.annual_leave_balance),
                    int(employee.total_annual_leave),
                    int(employee.monthly_late_allowance),
                    employee.last_reset_date,
                    employee.code,
                ),
            )

    def create(self, employee: Employee) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO employees({_COLUMNS})
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    require_non_empty(employee.code, "code"),
                    require_non_empty(employee.full_name, "full_name"),
                    employee.department,
                    require_non_negative(employee.base_salary, "base_salary"),
                    employee.base_bonus,
                    require_percentage(employee.bonus_percentage, "bonus_percentage"),
                    employee.meal_allowance,
                    employee.medical_insurance,
                    employee.social_insurance,
                    employee.eid_bonus,
                    employee.penalties_value,
                    employee.violations_installment,
                    require_work_week(employee.work_days_per_week),
                    employee.annual_leave_balance,
                    employee.total_annual_leave,
                    employee.monthly_late_allowance,
                    employee.last_reset_date,
                ),
            )
