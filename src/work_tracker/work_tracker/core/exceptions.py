class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidTimeError(ValidationError):
    """Raised when a time literal is not a valid HH:MM."""


class InvalidDateError(ValidationError):
    """Raised when a date literal is not a valid YYYY-MM-DD."""


class InvalidMonthError(ValidationError):
    """Raised when a month literal is not a valid YYYY-MM."""


class ClockOrderError(ValidationError):
    """Raised when clock-out is not strictly after clock-in."""


class NoPendingClockInError(ValidationError):
    """Raised when clocking out without an open clock-in."""


class StalePendingClockInError(ValidationError):
    """Raised when the open clock-in belongs to another day."""


class ClockInAlreadyPendingError(ValidationError):
    """Raised when clocking in while another clock-in is still open."""


class CorruptPendingStateError(ValidationError):
    """Raised when the pending clock-in file cannot be understood."""


class LedgerWriteError(DomainError):
    """Raised when the month ledger cannot be written to disk."""
