from __future__ import annotations

import logging
from datetime import date, tzinfo

from ..common.calendar import days_in_range, is_weekly_off
from ..employees.model import Employee
from .model import DailyAttendanceRecord
from .repository import AttendanceRecordRepository
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import ResolutionContext
from .strategies.weekly_off_strategy import WeeklyOffStrategy

logger = logging.getLogger(__name__)


class GapFiller:
    """Guarantee one stored record per calendar day of a range.

    Missing days become weekly-off or absence records and are persisted, so
    querying the same range again returns the same set. Existing records are
    never overwritten.
    """

    def __init__(self, records: AttendanceRecordRepository, tz: tzinfo):
        self._records = records
        self._tz = tz

    def synthesize(self, employee: Employee, day: date) -> DailyAttendanceRecord:
        ctx = ResolutionContext(
            code=employee.code,
            day=day,
            check_in=None,
            check_out=None,
            work_days_per_week=employee.work_days_per_week,
            tz=self._tz,
        )
        if is_weekly_off(day, employee.work_days_per_week, self._tz):
            return WeeklyOffStrategy().resolve(ctx).record
        return AbsentStrategy().resolve(ctx).record

    def fill(self, employee: Employee, start: date, end: date) -> list[DailyAttendanceRecord]:
        days = list(days_in_range(start, end))
        existing = {r.day: r for r in self._records.find_by_employee_and_range(employee.code, start, end)}

        out: list[DailyAttendanceRecord] = []
        created = 0
        for day in days:
            record = existing.get(day)
            if record is None:
                record = self.synthesize(employee, day)
                self._records.upsert(record)
                created += 1
            out.append(record)

        if created:
            logger.info(
                "Filled missing attendance days",
                extra={
                    "employee_code": employee.code,
                    "start": start.isoformat(),
                    "end": end.isoformat(),
                    "days_created": created,
                },
            )
        return out
