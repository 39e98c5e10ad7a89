from __future__ import annotations

from dataclasses import replace
from datetime import tzinfo

from ..attendance.model import DailyAttendanceRecord
from ..common.calendar import at_local_time
from ..core.constants import (
    ABSENCE_DEDUCTION,
    EARLY_LEAVE_DEDUCTION_BEFORE_LIMIT,
    EARLY_LEAVE_DEDUCTION_BEFORE_THRESHOLD,
    EARLY_LEAVE_LIMIT,
    EARLY_LEAVE_THRESHOLD,
)
from ..core.enums import DayStatus


class EarlyDepartureCalculator:
    """Early-departure deduction: up to 15:00 -> 0.5 day, up to 16:00 -> 0.25 day."""

    def __init__(self, tz: tzinfo):
        self._tz = tz

    def apply(self, record: DailyAttendanceRecord) -> DailyAttendanceRecord:
        if record.status not in (DayStatus.WORK, DayStatus.ABSENCE) or record.punch_error:
            return replace(record, early_leave_deduction=0.0)

        if record.check_out is None:
            deduction = float(ABSENCE_DEDUCTION) if record.absence else 0.0
            return replace(record, early_leave_deduction=deduction)

        check_out = record.check_out.astimezone(self._tz)
        threshold = at_local_time(check_out.date(), EARLY_LEAVE_THRESHOLD, self._tz)
        limit = at_local_time(check_out.date(), EARLY_LEAVE_LIMIT, self._tz)

        if check_out <= threshold:
            deduction = EARLY_LEAVE_DEDUCTION_BEFORE_THRESHOLD
        elif check_out <= limit:
            deduction = EARLY_LEAVE_DEDUCTION_BEFORE_LIMIT
        else:
            deduction = 0.0
        return replace(record, early_leave_deduction=deduction)
