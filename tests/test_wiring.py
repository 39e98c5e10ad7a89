from src.attendance_payroll.attendance_payroll.attendance.service import AttendanceService
from src.attendance_payroll.attendance_payroll.container import build_container
from src.attendance_payroll.attendance_payroll.payroll.service import PayrollReportService

from config import get_settings_module


def test_settings_module_follows_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    assert get_settings_module() == "config.production"

    monkeypatch.setenv("APP_ENV", "test")
    assert get_settings_module() == "config.testing"

    monkeypatch.delenv("APP_ENV")
    assert get_settings_module() == "config.development"


def test_build_container_wires_services(tz):
    container = build_container(
        db_config={"host": "localhost", "user": "root", "password": "", "database": "attendance_payroll"},
        timezone=tz,
    )

    assert isinstance(container.attendance_service, AttendanceService)
    assert isinstance(container.payroll_report_service, PayrollReportService)
    assert container.attendance_service._locks is container.payroll_report_service._locks
