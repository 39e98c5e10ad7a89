from __future__ import annotations

from ...core.constants import ABSENCE_DEDUCTION
from ...core.enums import DayStatus
from .base import Resolution, ResolutionContext, ResolutionStrategy


class AbsentStrategy(ResolutionStrategy):
    """No punch at all on a working day."""

    def resolve(self, ctx: ResolutionContext) -> Resolution:
        return Resolution(ctx.blank(DayStatus.ABSENCE, early_leave_deduction=float(ABSENCE_DEDUCTION)))
