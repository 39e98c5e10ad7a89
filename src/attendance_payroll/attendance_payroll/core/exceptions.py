class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidRange(ValidationError):
    """Raised when a date range ends before it starts."""


class ConflictingStatus(ValidationError):
    """Raised when more than one status flag is set on the same day."""


class InvalidTimestamp(ValidationError):
    """Raised when a check-in/check-out value cannot be parsed as an instant."""


class EmployeeNotFound(DomainError):
    """Raised when no employee exists for a code."""

    def __init__(self, code: str):
        super().__init__(f"Employee not found: {code}")
        self.code = code


class DayCountMismatch(DomainError):
    """Raised by strict aggregation when day categories do not cover the range."""
