from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import Optional

from ..common.calendar import is_weekly_off
from ..core.enums import DayStatus
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import ResolutionStrategy
from .strategies.invalid_punch_strategy import InvalidPunchStrategy
from .strategies.leave_strategy import AnnualLeaveStrategy, LeaveStrategy
from .strategies.punch_strategy import FullDayStrategy, SingleFingerprintStrategy
from .strategies.weekly_off_strategy import WeeklyOffStrategy


@dataclass
class ResolutionStrategyFactory:
    """Factory Pattern: choose the strategy for a day by fixed precedence.

    official leave > leave compensation > medical leave > annual leave >
    weekly off > unparseable punch > no punch > one punch > both punches.
    """

    def for_entry(
        self,
        *,
        requested: Optional[DayStatus],
        day: date,
        check_in: Optional[datetime],
        check_out: Optional[datetime],
        punch_error: Optional[str],
        work_days_per_week: int,
        tz: tzinfo,
    ) -> ResolutionStrategy:
        if requested in (DayStatus.OFFICIAL_LEAVE, DayStatus.LEAVE_COMPENSATION, DayStatus.MEDICAL_LEAVE):
            return LeaveStrategy(requested)
        if requested == DayStatus.ANNUAL_LEAVE:
            return AnnualLeaveStrategy()
        if is_weekly_off(day, work_days_per_week, tz):
            return WeeklyOffStrategy()
        if punch_error:
            return InvalidPunchStrategy()
        if check_in is None and check_out is None:
            return AbsentStrategy()
        if check_in is None or check_out is None:
            return SingleFingerprintStrategy()
        return FullDayStrategy()
