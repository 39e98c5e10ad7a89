"""Example: drive the services directly (no transport layer).

Uploads two punch rows, marks a sick day, then prints the period salary report.
"""

from datetime import date

from src.attendance_payroll.attendance_payroll.attendance.model import PunchEntry
from src.attendance_payroll.attendance_payroll.core.enums import DayStatus
from src.attendance_payroll.attendance_payroll.main import create_container


def main():
    container = create_container()

    batch = container.attendance_service.process_punches(
        [
            PunchEntry(code="1001", date="2024-03-02", check_in="08:40:00", check_out="17:00:00"),
            PunchEntry(code="1001", date="2024-03-03", check_in="09:30:00"),
        ]
    )
    print(f"created={batch.created} updated={batch.updated} skipped={batch.skipped} failed={batch.failed}")

    container.attendance_service.apply_leave_range("1001", date(2024, 3, 4), date(2024, 3, 5), DayStatus.MEDICAL_LEAVE)

    report = container.payroll_report_service.build_salary_report("1001", date(2024, 3, 1), date(2024, 3, 31))
    print(report.to_dict())


if __name__ == "__main__":
    main()
