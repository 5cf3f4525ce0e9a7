"""Domain models package."""

from .entities import Account, AccountSnapshot, Category, Transaction
from .finance import (
    AccountBalanceSummary,
    CategoryActivity,
    ExpenseBreakdownItem,
    FinancialContext,
    MonthlySummary,
    NetWorthPoint,
)
from .rows import SnapshotBalanceRow, TransactionRow

__all__ = [
    "Account",
    "AccountSnapshot",
    "Category",
    "Transaction",
    "AccountBalanceSummary",
    "CategoryActivity",
    "ExpenseBreakdownItem",
    "FinancialContext",
    "MonthlySummary",
    "NetWorthPoint",
    "SnapshotBalanceRow",
    "TransactionRow",
]
