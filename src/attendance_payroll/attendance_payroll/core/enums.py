from __future__ import annotations

from enum import Enum


class DayStatus(str, Enum):
    """Single classification of an employee-day, stored as-is in the database."""

    WORK = "WORK"
    ABSENCE = "ABSENCE"
    ANNUAL_LEAVE = "ANNUAL_LEAVE"
    MEDICAL_LEAVE = "MEDICAL_LEAVE"
    OFFICIAL_LEAVE = "OFFICIAL_LEAVE"
    LEAVE_COMPENSATION = "LEAVE_COMPENSATION"
    WEEKLY_OFF = "WEEKLY_OFF"


# Statuses that carry a leave-balance grant.
BALANCE_STATUSES = frozenset({DayStatus.ANNUAL_LEAVE, DayStatus.LEAVE_COMPENSATION})

LEAVE_STATUSES = frozenset(
    {
        DayStatus.ANNUAL_LEAVE,
        DayStatus.MEDICAL_LEAVE,
        DayStatus.OFFICIAL_LEAVE,
        DayStatus.LEAVE_COMPENSATION,
    }
)
