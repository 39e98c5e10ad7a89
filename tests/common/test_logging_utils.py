import json
import logging

from src.attendance_payroll.attendance_payroll.common.logging_utils import JsonFormatter


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord("attendance", logging.INFO, __file__, 10, "Leave day granted", None, None)
    record.employee_code = "1001"
    record.day = "2024-03-04"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "Leave day granted"
    assert payload["level"] == "INFO"
    assert payload["employee_code"] == "1001"
    assert payload["day"] == "2024-03-04"


def test_json_formatter_skips_standard_record_attributes():
    record = logging.makeLogRecord({"msg": "Batch processed", "records_created": 2})

    payload = json.loads(JsonFormatter().format(record))

    assert payload["records_created"] == 2
    for attr in ("lineno", "created", "msecs", "pathname", "threadName", "args"):
        assert attr not in payload
