"""Composition root for wiring infrastructure adapters."""

from finance_tracker.application.ports.database import DatabaseEnginePort
from finance_tracker.application.ports.finance_repository import (
    FinanceRepositoryPort,
)
from finance_tracker.application.use_cases.get_accounts import (
    GetAccountsUseCase,
)
from finance_tracker.application.use_cases.get_financial_context import (
    GetFinancialContextUseCase,
)
from finance_tracker.application.use_cases.get_monthly_summary import (
    GetMonthlySummaryUseCase,
)
from finance_tracker.application.use_cases.get_net_worth_series import (
    GetNetWorthSeriesUseCase,
)
from finance_tracker.application.use_cases.upsert_account_snapshot import (
    UpsertAccountSnapshotUseCase,
)
from finance_tracker.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from finance_tracker.infrastructure.finance_repository import (
    SqlAlchemyFinanceRepository,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_finance_repository(
    db_port: DatabaseEnginePort | None = None,
) -> SqlAlchemyFinanceRepository:
    """Return the SQL repository for finance reads and snapshot writes."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyFinanceRepository(resolved_db)


def build_monthly_summary_use_case(
    repository: FinanceRepositoryPort | None = None,
) -> GetMonthlySummaryUseCase:
    """Return the monthly summary use case."""
    return GetMonthlySummaryUseCase(
        finance_repository=repository or build_finance_repository(),
        logger=get_app_logger(),
    )


def build_net_worth_series_use_case(
    repository: FinanceRepositoryPort | None = None,
) -> GetNetWorthSeriesUseCase:
    """Return the net worth series use case."""
    return GetNetWorthSeriesUseCase(
        finance_repository=repository or build_finance_repository(),
        logger=get_app_logger(),
    )


def build_financial_context_use_case(
    repository: FinanceRepositoryPort | None = None,
) -> GetFinancialContextUseCase:
    """Return the financial context use case."""
    return GetFinancialContextUseCase(
        finance_repository=repository or build_finance_repository(),
        logger=get_app_logger(),
    )


def build_accounts_use_case(
    repository: FinanceRepositoryPort | None = None,
) -> GetAccountsUseCase:
    """Return the accounts listing use case."""
    return GetAccountsUseCase(
        finance_repository=repository or build_finance_repository(),
    )


def build_upsert_snapshot_use_case(
    repository: SqlAlchemyFinanceRepository | None = None,
) -> UpsertAccountSnapshotUseCase:
    """Return the snapshot upsert use case."""
    return UpsertAccountSnapshotUseCase(
        snapshots_repository=repository or build_finance_repository(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_finance_repository",
    "build_monthly_summary_use_case",
    "build_net_worth_series_use_case",
    "build_financial_context_use_case",
    "build_accounts_use_case",
    "build_upsert_snapshot_use_case",
]
