from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..core.enums import DayStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, from_db_datetime, to_db_datetime
from .model import DailyAttendanceRecord
from .repository import AttendanceRecordRepository

_COLUMNS = """
    code, work_day, status, check_in, check_out, work_hours, overtime, late_minutes,
    late_deduction, early_leave_deduction, medical_leave_deduction, is_single_fingerprint,
    work_days_per_week, allowance_minutes_consumed, allowance_period, leave_balance_applied,
    punch_error
"""


def _row_to_record(r: Dict[str, Any]) -> DailyAttendanceRecord:
    return DailyAttendanceRecord(
        code=r["code"],
        day=r["work_day"],
        status=DayStatus(r["status"]),
        check_in=from_db_datetime(r.get("check_in")),
        check_out=from_db_datetime(r.get("check_out")),
        work_hours=float(r["work_hours"]),
        overtime=float(r["overtime"]),
        late_minutes=int(r["late_minutes"]),
        late_deduction=float(r["late_deduction"]),
        early_leave_deduction=float(r["early_leave_deduction"]),
        medical_leave_deduction=float(r["medical_leave_deduction"]),
        is_single_fingerprint=bool(r["is_single_fingerprint"]),
        work_days_per_week=int(r["work_days_per_week"]),
        allowance_minutes_consumed=int(r["allowance_minutes_consumed"]),
        allowance_period=r.get("allowance_period"),
        leave_balance_applied=bool(r["leave_balance_applied"]),
        punch_error=r.get("punch_error"),
    )


class MySQLAttendanceRepository(AttendanceRecordRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_by_employee_and_day(self, code: str, day: date) -> Optional[DailyAttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_records WHERE code=%s AND work_day=%s",
                (code, day),
            )
            r = fetchone(cur)
            return _row_to_record(r) if r else None

    def find_by_employee_and_range(self, code: str, start: date, end: date) -> Sequence[DailyAttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE code=%s AND work_day BETWEEN %s AND %s
                ORDER BY work_day ASC
                """,
                (code, start, end),
            )
            return [_row_to_record(r) for r in fetchall(cur)]

    def upsert(self, record: DailyAttendanceRecord) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO attendance_records({_COLUMNS})
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    status=VALUES(status),
                    check_in=VALUES(check_in),
                    check_out=VALUES(check_out),
                    work_hours=VALUES(work_hours),
                    overtime=VALUES(overtime),
                    late_minutes=VALUES(late_minutes),
                    late_deduction=VALUES(late_deduction),
                    early_leave_deduction=VALUES(early_leave_deduction),
                    medical_leave_deduction=VALUES(medical_leave_deduction),
                    is_single_fingerprint=VALUES(is_single_fingerprint),
                    work_days_per_week=VALUES(work_days_per_week),
                    allowance_minutes_consumed=VALUES(allowance_minutes_consumed),
                    allowance_period=VALUES(allowance_period),
                    leave_balance_applied=VALUES(leave_balance_applied),
                    punch_error=VALUES(punch_error)
                """,
                (
                    record.code,
                    record.day,
                    record.status.value,
                    to_db_datetime(record.check_in),
                    to_db_datetime(record.check_out),
                    record.work_hours,
                    record.overtime,
                    record.late_minutes,
                    record.late_deduction,
                    record.early_leave_deduction,
                    record.medical_leave_deduction,
                    int(record.is_single_fingerprint),
                    record.work_days_per_week,
                    record.allowance_minutes_consumed,
                    record.allowance_period,
                    int(record.leave_balance_applied),
                    record.punch_error,
                ),
            )
            # MySQL reports 1 affected row for an insert, 2 (or 0 if unchanged) for an update.
            return cur.rowcount == 1

    def delete(self, code: str, day: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE code=%s AND work_day=%s", (code, day))
            return cur.rowcount > 0

    def delete_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records")
            return int(cur.rowcount)
