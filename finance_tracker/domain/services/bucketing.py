"""Calendar bucketing helpers for time series aggregation."""

from datetime import date, timedelta

from finance_tracker.domain.constants import (
    DEFAULT_INTERVAL,
    INTERVAL_DAY,
    INTERVAL_WEEK,
    SUPPORTED_INTERVALS,
)


def normalize_interval(interval: str | None) -> str:
    """Normalize a bucketing interval name.

    Args:
        interval: Raw interval value, case-insensitive.

    Returns:
        str: One of day, week or month. Unknown or missing values fall back
        to month.
    """
    if not interval:
        return DEFAULT_INTERVAL
    cleaned = interval.strip().lower()
    if cleaned in SUPPORTED_INTERVALS:
        return cleaned
    return DEFAULT_INTERVAL


def bucket_start(value: date, interval: str) -> date:
    """Return the first day of the bucket containing ``value``.

    Weeks are anchored on the Monday on or before the date, so a Monday maps
    to itself and a Sunday maps six days back. This is not ISO week
    numbering.

    Args:
        value: Calendar date to bucket.
        interval: Bucketing interval (day, week or month).

    Returns:
        date: Start date of the bucket.
    """
    interval = normalize_interval(interval)
    if interval == INTERVAL_DAY:
        return value
    if interval == INTERVAL_WEEK:
        return value - timedelta(days=value.weekday())
    return value.replace(day=1)


__all__ = ["normalize_interval", "bucket_start"]
