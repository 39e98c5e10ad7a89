from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import DailyAttendanceRecord


class AttendanceRecordRepository(Protocol):
    """Store of daily records, unique per (code, day)."""

    def find_by_employee_and_day(self, code: str, day: date) -> Optional[DailyAttendanceRecord]:
        raise NotImplementedError

    def find_by_employee_and_range(self, code: str, start: date, end: date) -> Sequence[DailyAttendanceRecord]:
        """Records of ``code`` within ``[start, end]``, ascending by day."""

        raise NotImplementedError

    def upsert(self, record: DailyAttendanceRecord) -> bool:
        """Insert or replace by (code, day). Returns True when a new row was created."""

        raise NotImplementedError

    def delete(self, code: str, day: date) -> bool:
        raise NotImplementedError

    def delete_all(self) -> int:
        raise NotImplementedError
