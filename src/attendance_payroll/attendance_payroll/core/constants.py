"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

DEFAULT_TIMEZONE = "Africa/Cairo"

# Workday reference points (organization local time)
WORKDAY_START = time(8, 30)
WORKDAY_END = time(17, 30)
LATE_LIMIT = time(9, 15)
LATE_THRESHOLD = time(11, 0)
EARLY_LEAVE_THRESHOLD = time(15, 0)
EARLY_LEAVE_LIMIT = time(16, 0)

MAX_WORK_HOURS = 8
ANNUAL_LEAVE_WORK_HOURS = 8

# Deduction values in days
LATE_DEDUCTION_OVER_ALLOWANCE = 0.25
LATE_DEDUCTION_OVER_THRESHOLD = 0.5
EARLY_LEAVE_DEDUCTION_BEFORE_THRESHOLD = 0.5
EARLY_LEAVE_DEDUCTION_BEFORE_LIMIT = 0.25
ABSENCE_DEDUCTION = 1
MEDICAL_LEAVE_DEDUCTION = 0.25

DEFAULT_MONTHLY_LATE_ALLOWANCE = 120
DEFAULT_MEAL_ALLOWANCE = 500
MEAL_ALLOWANCE_CUT_PER_LEAVE_DAY = 50
DEFAULT_WORK_DAYS_PER_WEEK = 6
SUPPORTED_WORK_WEEKS = (5, 6)

SALARY_DAYS_PER_MONTH = 30
PAID_HOURS_PER_DAY = 9
