"""Domain package for business rules and core models."""

from .constants import (
    DEFAULT_INTERVAL,
    SUPPORTED_INTERVALS,
    UNKNOWN_CATEGORY_NAME,
)
from .errors import FinanceTrackerError, InvalidArgumentError, NotFoundError
from .models import (
    Account,
    AccountBalanceSummary,
    AccountSnapshot,
    Category,
    CategoryActivity,
    ExpenseBreakdownItem,
    FinancialContext,
    MonthlySummary,
    NetWorthPoint,
    SnapshotBalanceRow,
    Transaction,
    TransactionRow,
)
from .services import (
    bucket_start,
    compute_financial_context,
    compute_monthly_summary,
    compute_net_worth_series,
    normalize_interval,
)

__all__ = [
    "Account",
    "AccountBalanceSummary",
    "AccountSnapshot",
    "Category",
    "CategoryActivity",
    "ExpenseBreakdownItem",
    "FinancialContext",
    "MonthlySummary",
    "NetWorthPoint",
    "SnapshotBalanceRow",
    "Transaction",
    "TransactionRow",
    "DEFAULT_INTERVAL",
    "SUPPORTED_INTERVALS",
    "UNKNOWN_CATEGORY_NAME",
    "FinanceTrackerError",
    "InvalidArgumentError",
    "NotFoundError",
    "bucket_start",
    "compute_financial_context",
    "compute_monthly_summary",
    "compute_net_worth_series",
    "normalize_interval",
]
