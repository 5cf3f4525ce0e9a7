"""Tests for the report and snapshot CLI adapters."""

from datetime import date
from decimal import Decimal
import json
from unittest.mock import MagicMock

from finance_tracker.adapters import (
    financial_context_cli,
    monthly_summary_cli,
    net_worth_cli,
    upsert_snapshot_cli,
)
from finance_tracker.adapters.serialization import to_json
from finance_tracker.domain.errors import InvalidArgumentError, NotFoundError
from finance_tracker.domain.models import (
    AccountBalanceSummary,
    AccountSnapshot,
    CategoryActivity,
    ExpenseBreakdownItem,
    FinancialContext,
    MonthlySummary,
    NetWorthPoint,
)
from finance_tracker.infrastructure.settings import FinanceSettings


def _patch_common(monkeypatch, module, user_id="user-1", interval="month"):
    logger = MagicMock()
    monkeypatch.setattr(module, "get_app_logger", lambda: logger)
    monkeypatch.setattr(
        module.FinanceSettings,
        "from_env",
        classmethod(
            lambda cls: FinanceSettings(
                user_id=user_id,
                default_interval=interval,
            )
        ),
    )
    return logger


def test_to_json_keeps_decimals_exact() -> None:
    payload = {"net": Decimal("0.10"), "date": date(2025, 1, 1)}

    assert json.loads(to_json(payload)) == {
        "net": "0.10",
        "date": "2025-01-01",
    }


def test_monthly_summary_cli_prints_summary(monkeypatch, capsys) -> None:
    _patch_common(monkeypatch, monthly_summary_cli)
    monkeypatch.setenv("REPORT_MONTH", "2025-12")
    use_case = MagicMock()
    use_case.execute.return_value = MonthlySummary(
        month="2025-12",
        total_income=Decimal("3000"),
        total_expenses=Decimal("-280"),
        net=Decimal("2720"),
        expense_breakdown=(
            ExpenseBreakdownItem(1, "Food", Decimal("-230")),
            ExpenseBreakdownItem(2, "Transport", Decimal("-50")),
        ),
    )
    monkeypatch.setattr(
        monthly_summary_cli,
        "build_monthly_summary_use_case",
        lambda: use_case,
    )

    monthly_summary_cli.main()

    use_case.execute.assert_called_once_with("user-1", "2025-12")
    payload = json.loads(capsys.readouterr().out)
    assert payload["net"] == "2720"
    assert [item["categoryName"] for item in payload["expenseBreakdown"]] == [
        "Food",
        "Transport",
    ]


def test_monthly_summary_cli_logs_invalid_month(monkeypatch, capsys) -> None:
    logger = _patch_common(monkeypatch, monthly_summary_cli)
    monkeypatch.setenv("REPORT_MONTH", "nope")
    use_case = MagicMock()
    use_case.execute.side_effect = InvalidArgumentError("Invalid month.")
    monkeypatch.setattr(
        monthly_summary_cli,
        "build_monthly_summary_use_case",
        lambda: use_case,
    )

    monthly_summary_cli.main()

    logger.error.assert_called_once_with("Invalid month.")
    assert capsys.readouterr().out == ""


def test_monthly_summary_cli_requires_user(monkeypatch) -> None:
    logger = _patch_common(monkeypatch, monthly_summary_cli, user_id=None)
    builder = MagicMock()
    monkeypatch.setattr(
        monthly_summary_cli,
        "build_monthly_summary_use_case",
        builder,
    )

    monthly_summary_cli.main()

    logger.warning.assert_called_once()
    builder.assert_not_called()


def test_net_worth_cli_prints_points(monkeypatch, capsys) -> None:
    _patch_common(monkeypatch, net_worth_cli, interval="week")
    monkeypatch.setenv("NET_WORTH_FROM", "2025-01-01")
    monkeypatch.setenv("NET_WORTH_TO", "2025-01-31")
    use_case = MagicMock()
    use_case.execute.return_value = [
        NetWorthPoint(date=date(2024, 12, 30), net_worth=Decimal("1000")),
        NetWorthPoint(date=date(2025, 1, 6), net_worth=Decimal("-25.50")),
    ]
    monkeypatch.setattr(
        net_worth_cli,
        "build_net_worth_series_use_case",
        lambda: use_case,
    )

    net_worth_cli.main()

    use_case.execute.assert_called_once_with(
        "user-1",
        "2025-01-01",
        "2025-01-31",
        interval="week",
    )
    assert json.loads(capsys.readouterr().out) == [
        {"date": "2024-12-30", "netWorth": "1000"},
        {"date": "2025-01-06", "netWorth": "-25.50"},
    ]


def test_upsert_snapshot_cli_prints_record(monkeypatch, capsys) -> None:
    _patch_common(monkeypatch, upsert_snapshot_cli)
    monkeypatch.setenv("SNAPSHOT_ACCOUNT_ID", "acc-1")
    monkeypatch.setenv("SNAPSHOT_DATE", "2025-01-15")
    monkeypatch.setenv("SNAPSHOT_BALANCE", "1000.00")
    use_case = MagicMock()
    use_case.execute.return_value = AccountSnapshot(
        id="snap-1",
        account_id="acc-1",
        snapshot_date=date(2025, 1, 15),
        balance=Decimal("1000.00"),
        user_id="user-1",
    )
    monkeypatch.setattr(
        upsert_snapshot_cli,
        "build_upsert_snapshot_use_case",
        lambda: use_case,
    )

    upsert_snapshot_cli.main()

    use_case.execute.assert_called_once_with(
        "user-1",
        "acc-1",
        "2025-01-15",
        "1000.00",
    )
    assert json.loads(capsys.readouterr().out) == {
        "id": "snap-1",
        "accountId": "acc-1",
        "date": "2025-01-15",
        "balance": "1000.00",
    }


def test_upsert_snapshot_cli_logs_missing_account(monkeypatch) -> None:
    logger = _patch_common(monkeypatch, upsert_snapshot_cli)
    monkeypatch.setenv("SNAPSHOT_ACCOUNT_ID", "missing")
    monkeypatch.setenv("SNAPSHOT_BALANCE", "10")
    use_case = MagicMock()
    use_case.execute.side_effect = NotFoundError("Account not found: missing")
    monkeypatch.setattr(
        upsert_snapshot_cli,
        "build_upsert_snapshot_use_case",
        lambda: use_case,
    )

    upsert_snapshot_cli.main()

    logger.error.assert_called_once_with("Account not found: missing")


def test_financial_context_cli_prints_sections(monkeypatch, capsys) -> None:
    _patch_common(monkeypatch, financial_context_cli)
    use_case = MagicMock()
    use_case.execute.return_value = FinancialContext(
        accounts=(
            AccountBalanceSummary(
                account_id="acc-1",
                name="Checking",
                account_type="bank",
                is_liability=False,
                latest_balance=Decimal("5000.00"),
                latest_balance_date=date(2025, 1, 15),
            ),
        ),
        total_balance=Decimal("5000.00"),
        transaction_count=1,
        total_income=Decimal("100"),
        total_expenses=Decimal("0"),
        net=Decimal("100"),
        earliest_date=date(2025, 1, 1),
        latest_date=date(2025, 1, 1),
        category_breakdown=(CategoryActivity("Salary", Decimal("100"), 1),),
        category_names=("Salary",),
    )
    monkeypatch.setattr(
        financial_context_cli,
        "build_financial_context_use_case",
        lambda: use_case,
    )

    financial_context_cli.main()

    use_case.execute.assert_called_once_with("user-1")
    payload = json.loads(capsys.readouterr().out)
    assert payload["accounts"]["totalBalance"] == "5000.00"
    assert payload["accounts"]["items"][0]["latestBalanceDate"] == "2025-01-15"
    assert payload["transactions"]["categoryBreakdown"] == [
        {"categoryName": "Salary", "total": "100", "count": 1},
    ]
    assert payload["categories"] == {
        "totalCategories": 1,
        "categoryNames": ["Salary"],
    }


def test_financial_context_cli_requires_user(monkeypatch) -> None:
    logger = _patch_common(monkeypatch, financial_context_cli, user_id=None)
    builder = MagicMock()
    monkeypatch.setattr(
        financial_context_cli,
        "build_financial_context_use_case",
        builder,
    )

    financial_context_cli.main()

    logger.warning.assert_called_once()
    builder.assert_not_called()
