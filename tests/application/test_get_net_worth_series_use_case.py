"""Tests for the GetNetWorthSeriesUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from finance_tracker.application.use_cases.get_net_worth_series import (
    GetNetWorthSeriesUseCase,
)
from finance_tracker.domain.errors import InvalidArgumentError
from finance_tracker.domain.models import SnapshotBalanceRow


def _row(account_id, day, balance, is_liability=False) -> SnapshotBalanceRow:
    return SnapshotBalanceRow(
        account_id=account_id,
        snapshot_date=day,
        balance=Decimal(balance),
        is_liability=is_liability,
    )


def test_execute_parses_dates_and_aggregates_buckets() -> None:
    """Use case should pass the closed range and bucket the rows."""
    repository = MagicMock()
    repository.fetch_snapshot_balances.return_value = [
        _row("checking", date(2025, 1, 15), "1000"),
        _row("savings", date(2025, 1, 20), "5000"),
        _row("card", date(2025, 1, 25), "200", is_liability=True),
    ]

    use_case = GetNetWorthSeriesUseCase(
        finance_repository=repository,
        logger=MagicMock(),
    )

    result = use_case.execute("user-1", "2025-01-01", "2025-01-31", "MONTH")

    repository.fetch_snapshot_balances.assert_called_once_with(
        "user-1",
        date(2025, 1, 1),
        date(2025, 1, 31),
    )
    assert [point.to_dict() for point in result] == [
        {"date": "2025-01-01", "netWorth": Decimal("5800")}
    ]


def test_execute_defaults_to_month_interval() -> None:
    repository = MagicMock()
    repository.fetch_snapshot_balances.return_value = [
        _row("checking", date(2025, 1, 10), "1000"),
        _row("checking", date(2025, 2, 10), "1500"),
        _row("checking", date(2025, 3, 10), "2000"),
    ]

    use_case = GetNetWorthSeriesUseCase(
        finance_repository=repository,
        logger=MagicMock(),
    )

    result = use_case.execute("user-1", date(2025, 1, 1), date(2025, 3, 31))

    assert [(p.date, p.net_worth) for p in result] == [
        (date(2025, 1, 1), Decimal("1000")),
        (date(2025, 2, 1), Decimal("1500")),
        (date(2025, 3, 1), Decimal("2000")),
    ]


def test_execute_returns_empty_list_without_snapshots() -> None:
    repository = MagicMock()
    repository.fetch_snapshot_balances.return_value = []

    use_case = GetNetWorthSeriesUseCase(
        finance_repository=repository,
        logger=MagicMock(),
    )

    assert use_case.execute("user-1", "2025-01-15", "2025-01-15", "day") == []


def test_execute_rejects_reversed_range_without_querying() -> None:
    repository = MagicMock()

    use_case = GetNetWorthSeriesUseCase(
        finance_repository=repository,
        logger=MagicMock(),
    )

    with pytest.raises(InvalidArgumentError):
        use_case.execute("user-1", "2025-02-01", "2025-01-01", "month")

    repository.fetch_snapshot_balances.assert_not_called()


def test_execute_rejects_malformed_dates() -> None:
    repository = MagicMock()

    use_case = GetNetWorthSeriesUseCase(
        finance_repository=repository,
        logger=MagicMock(),
    )

    with pytest.raises(InvalidArgumentError):
        use_case.execute("user-1", "01/01/2025", "2025-01-31")

    repository.fetch_snapshot_balances.assert_not_called()
