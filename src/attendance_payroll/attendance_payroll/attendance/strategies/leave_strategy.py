from __future__ import annotations

from ...common.calendar import at_local_time
from ...core.constants import ANNUAL_LEAVE_WORK_HOURS, MEDICAL_LEAVE_DEDUCTION, WORKDAY_END, WORKDAY_START
from ...core.enums import DayStatus
from .base import Resolution, ResolutionContext, ResolutionStrategy


class LeaveStrategy(ResolutionStrategy):
    """Official leave, leave compensation and medical leave: no punches, no hours."""

    def __init__(self, status: DayStatus):
        self._status = status

    @property
    def status(self) -> DayStatus:
        return self._status

    def resolve(self, ctx: ResolutionContext) -> Resolution:
        if self._status == DayStatus.MEDICAL_LEAVE:
            return Resolution(ctx.blank(self._status, medical_leave_deduction=MEDICAL_LEAVE_DEDUCTION))
        return Resolution(ctx.blank(self._status))


class AnnualLeaveStrategy(ResolutionStrategy):
    """Annual leave counts as a canonical full workday."""

    def resolve(self, ctx: ResolutionContext) -> Resolution:
        return Resolution(
            ctx.blank(
                DayStatus.ANNUAL_LEAVE,
                check_in=at_local_time(ctx.day, WORKDAY_START, ctx.tz),
                check_out=at_local_time(ctx.day, WORKDAY_END, ctx.tz),
                work_hours=float(ANNUAL_LEAVE_WORK_HOURS),
            )
        )
