from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, tzinfo
from typing import Iterable, Optional

from ..common.calendar import days_in_range, is_weekly_off
from ..common.datetime_utils import Clock, SystemClock, parse_iso_date
from ..common.locks import EmployeeLocks
from ..core.enums import LEAVE_STATUSES, DayStatus
from ..core.exceptions import DomainError, EmployeeNotFound, ValidationError
from ..employees.allowance import refresh_monthly_allowance, release_allowance
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..leaves.ledger import LeaveLedger
from ..penalties.early import EarlyDepartureCalculator
from ..penalties.late import LatePenaltyCalculator
from .model import AttendanceEntry, DailyAttendanceRecord, PunchEntry, StatusIntent
from .repository import AttendanceRecordRepository
from .resolver import StatusResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BatchResult:
    created: int = 0
    updated: int = 0
    skipped: int = 0
    failed: int = 0
    records: list[DailyAttendanceRecord] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


class AttendanceService:
    """Runs the per-record pipeline: resolve -> late/early penalties -> leave ledger -> commit.

    Each run starts from the employee baseline with the record's previous
    allowance charge released, so processing an unchanged record again
    produces the same record and leaves the employee untouched.
    """

    def __init__(
        self,
        records: AttendanceRecordRepository,
        employees: EmployeeRepository,
        *,
        tz: tzinfo,
        clock: Optional[Clock] = None,
        resolver: Optional[StatusResolver] = None,
        late_calculator: Optional[LatePenaltyCalculator] = None,
        early_calculator: Optional[EarlyDepartureCalculator] = None,
        ledger: Optional[LeaveLedger] = None,
        locks: Optional[EmployeeLocks] = None,
    ):
        self._records = records
        self._employees = employees
        self._tz = tz
        self._clock = clock or SystemClock(tz)
        self._resolver = resolver or StatusResolver(tz)
        self._late = late_calculator or LatePenaltyCalculator(tz)
        self._early = early_calculator or EarlyDepartureCalculator(tz)
        self._ledger = ledger or LeaveLedger()
        self._locks = locks or EmployeeLocks()

    def record_attendance(self, entry: AttendanceEntry, *, as_of: Optional[datetime] = None) -> DailyAttendanceRecord:
        with self._locks.hold(entry.code):
            record, _ = self._process(entry, as_of=as_of)
        return record

    def process_punches(self, punches: Iterable[PunchEntry], *, as_of: Optional[datetime] = None) -> BatchResult:
        """Batch intake of parsed time-clock rows.

        Rows are processed per employee in ascending day order. A bad row
        (unknown employee, bad date, domain error) is skipped and never
        aborts the batch. Fresh punches replace any leave status of the day.
        """
        created = updated = skipped = failed = 0
        records: list[DailyAttendanceRecord] = []
        errors: list[str] = []

        parsed: list[tuple[date, PunchEntry]] = []
        for punch in punches:
            try:
                parsed.append((parse_iso_date(punch.date), punch))
            except ValidationError as exc:
                skipped += 1
                errors.append(f"{punch.code}: {exc}")
                logger.warning("Skipping punch with invalid date", extra={"employee_code": punch.code, "raw_date": punch.date})
        parsed.sort(key=lambda item: (item[1].code, item[0]))

        for day, punch in parsed:
            if self._employees.find_by_code(punch.code) is None:
                skipped += 1
                errors.append(f"{punch.code}: unknown employee")
                logger.warning("Skipping punch for unknown employee", extra={"employee_code": punch.code})
                continue

            try:
                with self._locks.hold(punch.code):
                    existing = self._records.find_by_employee_and_day(punch.code, day)
                    # annual-leave punches are synthesized, not real punches
                    if existing is not None and existing.status == DayStatus.ANNUAL_LEAVE:
                        existing = None
                    entry = AttendanceEntry(
                        code=punch.code,
                        day=day,
                        check_in=punch.check_in or (existing.check_in if existing else None),
                        check_out=punch.check_out or (existing.check_out if existing else None),
                    )
                    record, was_created = self._process(entry, as_of=as_of)
            except DomainError as exc:
                failed += 1
                errors.append(f"{punch.code} {day.isoformat()}: {exc}")
                logger.warning(
                    "Punch processing failed",
                    extra={"employee_code": punch.code, "day": day.isoformat(), "error": str(exc)},
                )
                continue

            records.append(record)
            if was_created:
                created += 1
            else:
                updated += 1

        logger.info(
            "Punch batch processed",
            extra={"records_created": created, "records_updated": updated, "skipped": skipped, "failed": failed},
        )
        return BatchResult(
            created=created,
            updated=updated,
            skipped=skipped,
            failed=failed,
            records=records,
            errors=errors,
        )

    def apply_leave_range(
        self,
        code: str,
        start: date,
        end: date,
        status: DayStatus,
        *,
        as_of: Optional[datetime] = None,
    ) -> list[DailyAttendanceRecord]:
        """Mark every working day of ``[start, end]`` with a leave status (weekly-off days are skipped)."""
        if status not in LEAVE_STATUSES:
            raise ValidationError(f"Not a leave status: {status.value}")
        days = list(days_in_range(start, end))

        out: list[DailyAttendanceRecord] = []
        with self._locks.hold(code):
            employee = self._require_employee(code)
            for day in days:
                if is_weekly_off(day, employee.work_days_per_week, self._tz):
                    continue
                entry = AttendanceEntry(code=code, day=day, intent=StatusIntent.for_status(status))
                record, _ = self._process(entry, as_of=as_of)
                out.append(record)
        return out

    def recompute_period(
        self,
        code: str,
        start: date,
        end: date,
        *,
        as_of: Optional[datetime] = None,
    ) -> list[DailyAttendanceRecord]:
        """Reprocess stored records of a range in ascending day order."""
        list(days_in_range(start, end))
        with self._locks.hold(code):
            self._require_employee(code)
            stored = sorted(self._records.find_by_employee_and_range(code, start, end), key=lambda r: r.day)
            return [self._process(record.to_entry(), as_of=as_of)[0] for record in stored]

    def delete_record(self, code: str, day: date, *, as_of: Optional[datetime] = None) -> bool:
        """Delete one day, giving back its allowance charge and leave grant."""
        with self._locks.hold(code):
            previous = self._records.find_by_employee_and_day(code, day)
            if previous is None:
                return False
            employee = self._require_employee(code)

            after = refresh_monthly_allowance(employee, as_of=as_of or self._clock.now(), tz=self._tz)
            after = release_allowance(
                after,
                minutes=previous.allowance_minutes_consumed,
                period=previous.allowance_period,
            )
            after = self._ledger.release(previous, after)

            self._records.delete(code, day)
            if after != employee:
                try:
                    self._employees.save(after)
                except Exception:
                    logger.exception("Employee save failed, restoring deleted record", extra={"employee_code": code})
                    self._records.upsert(previous)
                    raise
            return True

    def delete_all(self) -> int:
        """Purge every stored record. Balances are left as they are."""
        deleted = self._records.delete_all()
        logger.info("Deleted all attendance records", extra={"deleted": deleted})
        return deleted

    def get_record(self, code: str, day: date) -> Optional[DailyAttendanceRecord]:
        return self._records.find_by_employee_and_day(code, day)

    def _require_employee(self, code: str) -> Employee:
        employee = self._employees.find_by_code(code)
        if employee is None:
            raise EmployeeNotFound(code)
        return employee

    def _process(self, entry: AttendanceEntry, *, as_of: Optional[datetime]) -> tuple[DailyAttendanceRecord, bool]:
        # Caller holds the employee lock.
        employee = self._require_employee(entry.code)
        previous = self._records.find_by_employee_and_day(entry.code, entry.day)

        baseline = refresh_monthly_allowance(employee, as_of=as_of or self._clock.now(), tz=self._tz)
        if previous is not None:
            baseline = release_allowance(
                baseline,
                minutes=previous.allowance_minutes_consumed,
                period=previous.allowance_period,
            )

        resolution = self._resolver.resolve(entry, baseline)
        record, updated = resolution.record, baseline
        if resolution.penalties_apply:
            record, updated = self._late.apply(record, updated)
            record = self._early.apply(record)
        record, updated = self._ledger.apply(previous, record, updated)

        created = self._commit(previous, record, employee, updated)
        return record, created

    def _commit(
        self,
        previous: Optional[DailyAttendanceRecord],
        record: DailyAttendanceRecord,
        before: Employee,
        after: Employee,
    ) -> bool:
        # Record first: the allowance is never charged without the record that explains it.
        created = self._records.upsert(record)
        if after == before:
            return created

        try:
            self._employees.save(after)
        except Exception:
            logger.exception(
                "Employee save failed, rolling back record",
                extra={"employee_code": record.code, "day": record.day.isoformat()},
            )
            if previous is None:
                self._records.delete(record.code, record.day)
            else:
                self._records.upsert(previous)
            raise
        return created
