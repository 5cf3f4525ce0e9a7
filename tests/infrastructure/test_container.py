"""Tests for the composition root."""

from unittest.mock import MagicMock

from finance_tracker.application.use_cases import (
    GetFinancialContextUseCase,
    GetMonthlySummaryUseCase,
    GetNetWorthSeriesUseCase,
    UpsertAccountSnapshotUseCase,
)
from finance_tracker.infrastructure import container
from finance_tracker.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from finance_tracker.infrastructure.finance_repository import (
    SqlAlchemyFinanceRepository,
)


def test_build_finance_repository_uses_default_adapter() -> None:
    repository = container.build_finance_repository()

    assert isinstance(repository, SqlAlchemyFinanceRepository)
    assert isinstance(repository._db_port, SqlAlchemyDatabaseEngineAdapter)


def test_use_case_builders_accept_repository(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    repository = MagicMock()

    summary = container.build_monthly_summary_use_case(repository)
    series = container.build_net_worth_series_use_case(repository)
    upsert = container.build_upsert_snapshot_use_case(repository)
    context = container.build_financial_context_use_case(repository)

    assert isinstance(summary, GetMonthlySummaryUseCase)
    assert isinstance(series, GetNetWorthSeriesUseCase)
    assert isinstance(upsert, UpsertAccountSnapshotUseCase)
    assert isinstance(context, GetFinancialContextUseCase)
    assert summary._finance_repository is repository
    assert upsert._snapshots_repository is repository
    assert context._finance_repository is repository
