from __future__ import annotations

import logging
from datetime import tzinfo
from typing import Optional

from ..common.datetime_utils import coerce_instant
from ..core.enums import DayStatus
from ..core.exceptions import InvalidTimestamp
from ..employees.model import Employee
from .factory import ResolutionStrategyFactory
from .model import AttendanceEntry
from .strategies.base import Resolution, ResolutionContext

logger = logging.getLogger(__name__)


class StatusResolver:
    """Classify one employee-day and fill the time fields its status prescribes.

    Raises ``ConflictingStatus`` when the entry requests more than one status.
    Unparseable punches never raise: the day degrades to a zeroed work day
    carrying ``punch_error``.
    """

    def __init__(self, tz: tzinfo, *, factory: Optional[ResolutionStrategyFactory] = None):
        self._tz = tz
        self._factory = factory or ResolutionStrategyFactory()

    def resolve(self, entry: AttendanceEntry, employee: Employee) -> Resolution:
        requested = entry.intent.requested()
        punch_error = entry.punch_error

        try:
            check_in = coerce_instant(entry.check_in, entry.day, self._tz)
            check_out = coerce_instant(entry.check_out, entry.day, self._tz)
        except InvalidTimestamp as exc:
            punch_error = str(exc)
            check_in = check_out = None

        if requested == DayStatus.ABSENCE:
            check_in = check_out = None
            punch_error = None

        ctx = ResolutionContext(
            code=entry.code,
            day=entry.day,
            check_in=check_in,
            check_out=check_out,
            work_days_per_week=employee.work_days_per_week,
            tz=self._tz,
            punch_error=punch_error,
        )
        strategy = self._factory.for_entry(
            requested=requested,
            day=entry.day,
            check_in=check_in,
            check_out=check_out,
            punch_error=punch_error,
            work_days_per_week=employee.work_days_per_week,
            tz=self._tz,
        )
        resolution = strategy.resolve(ctx)

        if resolution.record.punch_error:
            logger.warning(
                "Invalid punch, day zeroed",
                extra={"employee_code": entry.code, "day": entry.day.isoformat(), "reason": punch_error},
            )
        return resolution
