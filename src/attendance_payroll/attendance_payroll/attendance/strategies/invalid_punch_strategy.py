from __future__ import annotations

from ...core.enums import DayStatus
from .base import Resolution, ResolutionContext, ResolutionStrategy


class InvalidPunchStrategy(ResolutionStrategy):
    """A punch failed to parse: keep the day as a zeroed work day and carry the warning."""

    def resolve(self, ctx: ResolutionContext) -> Resolution:
        return Resolution(ctx.blank(DayStatus.WORK, punch_error=ctx.punch_error))
