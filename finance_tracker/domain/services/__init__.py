"""Domain services package."""

from .bucketing import bucket_start, normalize_interval
from .finance import (
    compute_financial_context,
    compute_monthly_summary,
    compute_net_worth_series,
)
from .validation import (
    parse_iso_date,
    parse_month,
    validate_balance_sign,
    validate_date_range,
    validate_snapshot_balance,
)

__all__ = [
    "bucket_start",
    "normalize_interval",
    "compute_financial_context",
    "compute_monthly_summary",
    "compute_net_worth_series",
    "parse_iso_date",
    "parse_month",
    "validate_balance_sign",
    "validate_date_range",
    "validate_snapshot_balance",
]
