from __future__ import annotations

from ..core.constants import SUPPORTED_WORK_WEEKS
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_non_negative(value: float, field_name: str) -> float:
    if value is None or value < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return value


def require_percentage(value: float, field_name: str) -> float:
    if value is None or not 0 <= value <= 100:
        raise ValidationError(f"{field_name} must be between 0 and 100")
    return value


def require_work_week(value: int) -> int:
    if value not in SUPPORTED_WORK_WEEKS:
        raise ValidationError("work_days_per_week must be 5 or 6")
    return int(value)
