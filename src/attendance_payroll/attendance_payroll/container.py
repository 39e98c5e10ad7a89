from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import SystemClock
from .common.locks import EmployeeLocks
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .payroll.aggregator import PeriodAggregator
from .payroll.service import PayrollReportService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    attendance_repo: MySQLAttendanceRepository

    attendance_service: AttendanceService
    payroll_report_service: PayrollReportService


def build_container(*, db_config: dict, timezone: tzinfo, strict_day_counts: bool = False) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)

    # Both services mutate the same employees, so they share one lock table.
    locks = EmployeeLocks()
    attendance_service = AttendanceService(
        attendance_repo,
        employees_repo,
        tz=timezone,
        clock=SystemClock(timezone),
        locks=locks,
    )
    payroll_report_service = PayrollReportService(
        attendance_repo,
        employees_repo,
        tz=timezone,
        aggregator=PeriodAggregator(strict=strict_day_counts),
        locks=locks,
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        attendance_service=attendance_service,
        payroll_report_service=payroll_report_service,
    )
