"""Domain constants for finance reporting."""

from decimal import Decimal

INTERVAL_DAY = "day"
INTERVAL_WEEK = "week"
INTERVAL_MONTH = "month"

SUPPORTED_INTERVALS = (
    INTERVAL_DAY,
    INTERVAL_WEEK,
    INTERVAL_MONTH,
)

DEFAULT_INTERVAL = INTERVAL_MONTH

UNKNOWN_CATEGORY_NAME = "Unknown"

# Exclusive bound on snapshot balance magnitude.
MAX_BALANCE_MAGNITUDE = Decimal("1000000000000")


__all__ = [
    "INTERVAL_DAY",
    "INTERVAL_WEEK",
    "INTERVAL_MONTH",
    "SUPPORTED_INTERVALS",
    "DEFAULT_INTERVAL",
    "UNKNOWN_CATEGORY_NAME",
    "MAX_BALANCE_MAGNITUDE",
]
