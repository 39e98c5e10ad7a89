from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import InstantLike
from ..core.constants import DEFAULT_WORK_DAYS_PER_WEEK
from ..core.enums import LEAVE_STATUSES, DayStatus
from ..core.exceptions import ConflictingStatus


@dataclass(frozen=True)
class StatusIntent:
    """Status flags requested by the caller for one day (at most one may be set)."""

    absence: bool = False
    annual_leave: bool = False
    medical_leave: bool = False
    official_leave: bool = False
    leave_compensation: bool = False

    def requested(self) -> Optional[DayStatus]:
        flags = {
            DayStatus.ABSENCE: self.absence,
            DayStatus.ANNUAL_LEAVE: self.annual_leave,
            DayStatus.MEDICAL_LEAVE: self.medical_leave,
            DayStatus.OFFICIAL_LEAVE: self.official_leave,
            DayStatus.LEAVE_COMPENSATION: self.leave_compensation,
        }
        chosen = [status for status, flag in flags.items() if flag]
        if len(chosen) > 1:
            names = ", ".join(s.value for s in chosen)
            raise ConflictingStatus(f"Only one status may be set per day (got {names})")
        return chosen[0] if chosen else None

    @classmethod
    def for_status(cls, status: Optional[DayStatus]) -> "StatusIntent":
        """Intent that re-requests a leave status; derived statuses carry no intent."""
        return cls(
            annual_leave=status == DayStatus.ANNUAL_LEAVE,
            medical_leave=status == DayStatus.MEDICAL_LEAVE,
            official_leave=status == DayStatus.OFFICIAL_LEAVE,
            leave_compensation=status == DayStatus.LEAVE_COMPENSATION,
        )


@dataclass(frozen=True)
class AttendanceEntry:
    """Partially filled day handed to the resolver (raw punches + intent)."""

    code: str
    day: date
    check_in: InstantLike = None
    check_out: InstantLike = None
    intent: StatusIntent = StatusIntent()
    # Set when an upstream punch could not be parsed and was dropped.
    punch_error: Optional[str] = None


@dataclass(frozen=True)
class PunchEntry:
    """One parsed time-clock row: ``{code, date, checkIn?, checkOut?}``."""

    code: str
    date: str
    check_in: Optional[str] = None
    check_out: Optional[str] = None


@dataclass(frozen=True)
class DailyAttendanceRecord:
    """Domain entity: the resolved attendance of one employee on one calendar day."""

    code: str
    day: date
    status: DayStatus
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    work_hours: float = 0.0
    overtime: float = 0.0
    late_minutes: int = 0
    late_deduction: float = 0.0
    early_leave_deduction: float = 0.0
    medical_leave_deduction: float = 0.0
    is_single_fingerprint: bool = False
    work_days_per_week: int = DEFAULT_WORK_DAYS_PER_WEEK
    # Effects applied to the employee, kept so reprocessing can undo them.
    allowance_minutes_consumed: int = 0
    allowance_period: Optional[date] = None
    leave_balance_applied: bool = False
    punch_error: Optional[str] = None

    @property
    def absence(self) -> bool:
        return self.status == DayStatus.ABSENCE

    @property
    def annual_leave(self) -> bool:
        return self.status == DayStatus.ANNUAL_LEAVE

    @property
    def medical_leave(self) -> bool:
        return self.status == DayStatus.MEDICAL_LEAVE

    @property
    def official_leave(self) -> bool:
        return self.status == DayStatus.OFFICIAL_LEAVE

    @property
    def leave_compensation(self) -> bool:
        return self.status == DayStatus.LEAVE_COMPENSATION

    @property
    def weekly_off(self) -> bool:
        return self.status == DayStatus.WEEKLY_OFF

    @property
    def is_leave(self) -> bool:
        return self.status in LEAVE_STATUSES

    def to_entry(self) -> AttendanceEntry:
        """Replay input for recomputation: stored punches plus any leave intent."""
        return AttendanceEntry(
            code=self.code,
            day=self.day,
            check_in=self.check_in,
            check_out=self.check_out,
            intent=StatusIntent.for_status(self.status),
            punch_error=self.punch_error,
        )
