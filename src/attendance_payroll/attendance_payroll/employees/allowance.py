from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime, tzinfo
from typing import Optional

from ..common.calendar import local_day, month_anchor
from ..core.constants import DEFAULT_MONTHLY_LATE_ALLOWANCE
from .model import Employee

logger = logging.getLogger(__name__)


def refresh_monthly_allowance(employee: Employee, *, as_of: datetime, tz: tzinfo) -> Employee:
    """Replenish the late allowance when ``as_of`` falls in a later month than the anchor.

    Must run before any decrement of the allowance for the same write. An
    employee without an anchor is anchored on the current month as-is.
    A backdated ``as_of`` never moves the anchor back.
    """
    anchor = month_anchor(local_day(as_of, tz))
    last = employee.last_reset_date
    if last is None:
        return replace(employee, last_reset_date=anchor)
    if (anchor.year, anchor.month) <= (last.year, last.month):
        return employee

    logger.info(
        "Monthly late allowance reset",
        extra={"employee_code": employee.code, "period": anchor.isoformat()},
    )
    return replace(
        employee,
        monthly_late_allowance=DEFAULT_MONTHLY_LATE_ALLOWANCE,
        last_reset_date=anchor,
    )


def release_allowance(employee: Employee, *, minutes: int, period: Optional[date]) -> Employee:
    """Give back minutes a record charged, if the charge belongs to the current period.

    Charges from an earlier month were already wiped by the monthly reset.
    """
    if minutes <= 0 or period is None or period != employee.last_reset_date:
        return employee
    return replace(employee, monthly_late_allowance=employee.monthly_late_allowance + minutes)
