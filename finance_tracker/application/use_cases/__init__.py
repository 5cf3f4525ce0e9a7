"""Application use cases package."""

from .get_accounts import GetAccountsUseCase, Account
from .get_financial_context import GetFinancialContextUseCase, FinancialContext
from .get_monthly_summary import GetMonthlySummaryUseCase, MonthlySummary
from .get_net_worth_series import GetNetWorthSeriesUseCase, NetWorthPoint
from .upsert_account_snapshot import (
    UpsertAccountSnapshotUseCase,
    AccountSnapshot,
)

__all__ = [
    "GetAccountsUseCase",
    "Account",
    "GetFinancialContextUseCase",
    "FinancialContext",
    "GetMonthlySummaryUseCase",
    "MonthlySummary",
    "GetNetWorthSeriesUseCase",
    "NetWorthPoint",
    "UpsertAccountSnapshotUseCase",
    "AccountSnapshot",
]
