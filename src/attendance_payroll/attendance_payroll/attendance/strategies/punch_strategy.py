from __future__ import annotations

from ...core.constants import MAX_WORK_HOURS
from ...core.enums import DayStatus
from .base import Resolution, ResolutionContext, ResolutionStrategy


class SingleFingerprintStrategy(ResolutionStrategy):
    """Only one of check-in/check-out captured: a missing punch, no hours credited."""

    def resolve(self, ctx: ResolutionContext) -> Resolution:
        record = ctx.blank(
            DayStatus.WORK,
            check_in=ctx.check_in,
            check_out=ctx.check_out,
            is_single_fingerprint=True,
        )
        return Resolution(record, penalties_apply=True)


class FullDayStrategy(ResolutionStrategy):
    """Both punches present: hours capped at the standard day, surplus is overtime."""

    def resolve(self, ctx: ResolutionContext) -> Resolution:
        hours = (ctx.check_out - ctx.check_in).total_seconds() / 3600
        record = ctx.blank(
            DayStatus.WORK,
            check_in=ctx.check_in,
            check_out=ctx.check_out,
            work_hours=max(min(hours, MAX_WORK_HOURS), 0.0),
            overtime=max(hours - MAX_WORK_HOURS, 0.0),
        )
        return Resolution(record, penalties_apply=True)
