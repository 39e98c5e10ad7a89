from __future__ import annotations

import logging
from collections import Counter
from dataclasses import replace
from datetime import date
from typing import Iterable

from ..attendance.model import DailyAttendanceRecord
from ..common.calendar import range_length
from ..core.enums import DayStatus
from ..core.exceptions import DayCountMismatch
from .model import PeriodTotals

logger = logging.getLogger(__name__)


class PeriodAggregator:
    """Sum a range of daily records into ``PeriodTotals``.

    Day categories must add up to the range length. When they do not (missing
    or extra records), the weekly-off count absorbs the difference; with
    ``strict=True`` a ``DayCountMismatch`` is raised instead.
    """

    def __init__(self, *, strict: bool = False):
        self._strict = strict

    def aggregate(self, records: Iterable[DailyAttendanceRecord], start: date, end: date) -> PeriodTotals:
        total_days = range_length(start, end)
        in_range = [r for r in records if start <= r.day <= end]

        counts = Counter(r.status for r in in_range)
        totals = PeriodTotals(
            total_days=total_days,
            total_work_days=counts[DayStatus.WORK],
            total_absence_days=counts[DayStatus.ABSENCE],
            total_weekly_leave_days=counts[DayStatus.WEEKLY_OFF],
            total_annual_leave_days=counts[DayStatus.ANNUAL_LEAVE],
            total_medical_leave_days=counts[DayStatus.MEDICAL_LEAVE],
            total_official_leave_days=counts[DayStatus.OFFICIAL_LEAVE],
            total_leave_compensation_days=counts[DayStatus.LEAVE_COMPENSATION],
            total_work_hours=sum(r.work_hours for r in in_range),
            total_overtime=sum(r.overtime for r in in_range),
            late_deduction_days=sum(r.late_deduction for r in in_range),
            early_leave_deduction_days=sum(r.early_leave_deduction for r in in_range),
            medical_leave_deduction_days=sum(r.medical_leave_deduction for r in in_range),
            total_late_days=sum(1 for r in in_range if r.late_deduction > 0),
        )
        return self._reconcile(totals)

    def _reconcile(self, totals: PeriodTotals) -> PeriodTotals:
        gap = totals.total_days - totals.category_days
        if gap == 0:
            return totals

        if self._strict:
            raise DayCountMismatch(
                f"Day categories cover {totals.category_days} days, range has {totals.total_days}"
            )
        logger.warning(
            "Day counts do not cover the range, adjusting weekly-off days",
            extra={"total_days": totals.total_days, "counted_days": totals.category_days, "adjustment": gap},
        )
        return replace(totals, total_weekly_leave_days=totals.total_weekly_leave_days + gap)
