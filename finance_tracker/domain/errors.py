"""Domain errors raised by the reporting core."""


class FinanceTrackerError(Exception):
    """Base class for finance tracker domain errors."""


class InvalidArgumentError(FinanceTrackerError, ValueError):
    """Raised when caller supplied parameters are missing or malformed."""


class NotFoundError(FinanceTrackerError, LookupError):
    """Raised when a referenced entity does not exist for the user."""


__all__ = ["FinanceTrackerError", "InvalidArgumentError", "NotFoundError"]
