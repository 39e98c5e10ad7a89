from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..attendance.model import DailyAttendanceRecord
from ..core.enums import BALANCE_STATUSES
from ..employees.model import Employee

logger = logging.getLogger(__name__)


def grant_leave_day(employee: Employee) -> Employee:
    return replace(
        employee,
        total_annual_leave=employee.total_annual_leave + 1,
        annual_leave_balance=max(employee.annual_leave_balance - 1, 0),
    )


def revert_leave_day(employee: Employee) -> Employee:
    return replace(
        employee,
        total_annual_leave=max(employee.total_annual_leave - 1, 0),
        annual_leave_balance=employee.annual_leave_balance + 1,
    )


class LeaveLedger:
    """Applies annual-leave / leave-compensation balance effects once per transition.

    Whether a day already holds a grant is read from the stored record
    (``leave_balance_applied``), never inferred from its current status, so
    recomputing or re-saving the same day cannot count it twice.
    """

    def apply(
        self,
        previous: Optional[DailyAttendanceRecord],
        record: DailyAttendanceRecord,
        employee: Employee,
    ) -> tuple[DailyAttendanceRecord, Employee]:
        held = bool(previous and previous.leave_balance_applied)
        wanted = record.status in BALANCE_STATUSES

        if wanted and not held:
            employee = grant_leave_day(employee)
            self._log("Leave day granted", record, employee)
        elif held and not wanted:
            employee = revert_leave_day(employee)
            self._log("Leave day reverted", record, employee)

        return replace(record, leave_balance_applied=wanted), employee

    def release(self, record: DailyAttendanceRecord, employee: Employee) -> Employee:
        """Undo the grant of a record that is being removed."""
        if not record.leave_balance_applied:
            return employee
        employee = revert_leave_day(employee)
        self._log("Leave day reverted", record, employee)
        return employee

    @staticmethod
    def _log(message: str, record: DailyAttendanceRecord, employee: Employee) -> None:
        logger.info(
            message,
            extra={
                "employee_code": employee.code,
                "day": record.day.isoformat(),
                "status": record.status.value,
                "total_annual_leave": employee.total_annual_leave,
                "annual_leave_balance": employee.annual_leave_balance,
            },
        )
