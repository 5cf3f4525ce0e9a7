"""Tests for the calendar bucketing helpers."""

from datetime import date

import pytest

from finance_tracker.domain.services.bucketing import (
    bucket_start,
    normalize_interval,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("day", "day"),
        ("WEEK", "week"),
        (" Month ", "month"),
        ("quarter", "month"),
        ("", "month"),
        (None, "month"),
    ],
)
def test_normalize_interval_defaults_to_month(raw, expected) -> None:
    """Unknown or missing intervals should fall back to month."""
    assert normalize_interval(raw) == expected


def test_day_bucket_is_identity() -> None:
    assert bucket_start(date(2025, 1, 15), "day") == date(2025, 1, 15)


def test_week_bucket_keeps_monday() -> None:
    """A Monday should map to itself."""
    monday = date(2025, 1, 6)
    assert monday.weekday() == 0
    assert bucket_start(monday, "week") == monday


def test_week_bucket_maps_sunday_six_days_back() -> None:
    """A Sunday should map to the Monday six days earlier."""
    sunday = date(2025, 1, 12)
    assert bucket_start(sunday, "week") == date(2025, 1, 6)


def test_week_bucket_crosses_month_and_year_boundaries() -> None:
    """Week buckets anchor on Monday even across a year change."""
    assert bucket_start(date(2025, 1, 1), "week") == date(2024, 12, 30)
    assert bucket_start(date(2025, 3, 1), "week") == date(2025, 2, 24)


def test_month_bucket_is_first_day() -> None:
    assert bucket_start(date(2024, 2, 29), "month") == date(2024, 2, 1)


def test_unknown_interval_buckets_by_month() -> None:
    assert bucket_start(date(2025, 7, 19), "fortnight") == date(2025, 7, 1)
