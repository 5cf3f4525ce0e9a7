"""Helpers for calendar date normalization."""

from datetime import date, datetime


def coerce_date(value) -> date:
    """Normalize date-like values returned by database drivers.

    SQLite hands dates back as ISO strings while PostgreSQL drivers return
    ``date`` objects.

    Args:
        value: Raw date value.

    Returns:
        date: Normalized calendar date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def format_date(value: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return value.strftime("%Y-%m-%d")


__all__ = ["coerce_date", "format_date"]
