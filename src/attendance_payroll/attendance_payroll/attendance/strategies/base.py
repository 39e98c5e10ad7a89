from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import Optional

from ...core.enums import DayStatus
from ..model import DailyAttendanceRecord


@dataclass(frozen=True)
class ResolutionContext:
    code: str
    day: date
    check_in: Optional[datetime]
    check_out: Optional[datetime]
    work_days_per_week: int
    tz: tzinfo
    punch_error: Optional[str] = None

    def blank(self, status: DayStatus, **fields) -> DailyAttendanceRecord:
        """Fully zeroed record for this day; branches fill only what they own."""
        return DailyAttendanceRecord(
            code=self.code,
            day=self.day,
            status=status,
            work_days_per_week=self.work_days_per_week,
            **fields,
        )


@dataclass(frozen=True)
class Resolution:
    record: DailyAttendanceRecord
    # Late/early calculators run only on punched work days.
    penalties_apply: bool = False


class ResolutionStrategy(ABC):
    """Strategy Pattern: encapsulate how one kind of day is classified."""

    @abstractmethod
    def resolve(self, ctx: ResolutionContext) -> Resolution:
        raise NotImplementedError
