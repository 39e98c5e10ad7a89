from __future__ import annotations

import logging
import math
from dataclasses import replace
from datetime import datetime, tzinfo
from typing import Optional

from ..attendance.model import DailyAttendanceRecord
from ..common.calendar import at_local_time
from ..core.constants import (
    LATE_DEDUCTION_OVER_ALLOWANCE,
    LATE_DEDUCTION_OVER_THRESHOLD,
    LATE_LIMIT,
    LATE_THRESHOLD,
    WORKDAY_START,
)
from ..core.enums import DayStatus
from ..employees.allowance import refresh_monthly_allowance
from ..employees.model import Employee

logger = logging.getLogger(__name__)


class LatePenaltyCalculator:
    """Late-arrival deduction against the employee's monthly minute allowance.

    - before 09:15 (45 min grace after 08:30): nothing recorded
    - 09:15 to 11:00: minutes are charged to the allowance; 0.25 day once it runs out
    - from 11:00: 0.5 day, allowance untouched

    Not idempotent on its own: the caller must release a record's previous
    charge (``allowance_minutes_consumed``) before running it again.
    """

    def __init__(self, tz: tzinfo):
        self._tz = tz

    def apply(
        self,
        record: DailyAttendanceRecord,
        employee: Employee,
        *,
        as_of: Optional[datetime] = None,
    ) -> tuple[DailyAttendanceRecord, Employee]:
        if as_of is not None:
            employee = refresh_monthly_allowance(employee, as_of=as_of, tz=self._tz)

        cleared = replace(
            record,
            late_minutes=0,
            late_deduction=0.0,
            allowance_minutes_consumed=0,
            allowance_period=None,
        )
        if record.status != DayStatus.WORK or record.punch_error or record.check_in is None:
            return cleared, employee

        check_in = record.check_in.astimezone(self._tz)
        local = check_in.date()
        expected_start = at_local_time(local, WORKDAY_START, self._tz)
        late_limit = at_local_time(local, LATE_LIMIT, self._tz)
        late_threshold = at_local_time(local, LATE_THRESHOLD, self._tz)

        diff = math.floor((check_in - expected_start).total_seconds() / 60)
        if diff <= 0 or check_in < late_limit:
            return cleared, employee

        if check_in >= late_threshold:
            logger.info(
                "Late arrival past threshold",
                extra={"employee_code": record.code, "day": record.day.isoformat(), "late_minutes": diff},
            )
            return replace(cleared, late_minutes=diff, late_deduction=LATE_DEDUCTION_OVER_THRESHOLD), employee

        available = employee.monthly_late_allowance
        if available >= diff:
            consumed, remaining, deduction = diff, available - diff, 0.0
        else:
            consumed, remaining, deduction = available, 0, LATE_DEDUCTION_OVER_ALLOWANCE

        logger.info(
            "Late minutes charged to monthly allowance",
            extra={
                "employee_code": record.code,
                "day": record.day.isoformat(),
                "late_minutes": diff,
                "allowance_left": remaining,
                "late_deduction": deduction,
            },
        )
        charged = replace(
            cleared,
            late_minutes=diff,
            late_deduction=deduction,
            allowance_minutes_consumed=consumed,
            allowance_period=employee.last_reset_date,
        )
        return charged, replace(employee, monthly_late_allowance=remaining)
