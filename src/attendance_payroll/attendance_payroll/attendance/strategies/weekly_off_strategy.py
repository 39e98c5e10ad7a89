from __future__ import annotations

from ...core.enums import DayStatus
from .base import Resolution, ResolutionContext, ResolutionStrategy


class WeeklyOffStrategy(ResolutionStrategy):
    """Weekly day off: punches are ignored and the day is never an absence."""

    def resolve(self, ctx: ResolutionContext) -> Resolution:
        return Resolution(ctx.blank(DayStatus.WEEKLY_OFF))
