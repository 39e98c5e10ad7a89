from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.attendance_payroll.attendance_payroll.common.logging_utils import setup_logging
from src.attendance_payroll.attendance_payroll.database.bootstrap import ensure_employees
from src.attendance_payroll.attendance_payroll.database.connection import DatabaseConnection, DBConfig
from src.attendance_payroll.attendance_payroll.employees.model import Employee
from src.attendance_payroll.attendance_payroll.employees.mysql_employee_repository import MySQLEmployeeRepository

DEMO_EMPLOYEES = (
    Employee(code="1001", full_name="Mona Adel", base_salary=3000.0, department="Operations"),
    Employee(code="1002", full_name="Omar Nabil", base_salary=4200.0, work_days_per_week=5, department="Finance"),
)


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    setup_logging(level=getattr(settings, "LOG_LEVEL", "INFO"), json_logs=False)
    db_config = dict(settings.DB_CONFIG)

    repo = MySQLEmployeeRepository(DatabaseConnection(DBConfig.from_dict(db_config)))
    created = ensure_employees(repo, DEMO_EMPLOYEES)

    print(
        "OK: Seeded database -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(employees_created={created})"
    )


if __name__ == "__main__":
    main()
