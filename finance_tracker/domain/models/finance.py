"""Domain models for financial aggregates."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any

from finance_tracker.utils.date_utils import format_date


@dataclass(frozen=True)
class ExpenseBreakdownItem:
    """Expense total for a single category.

    Attributes:
        category_id: Identifier of the category.
        category_name: Display name, or "Unknown" when the id is missing.
        total: Sum of expenses; negative.
    """

    category_id: int
    category_name: str
    total: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "categoryId": self.category_id,
            "categoryName": self.category_name,
            "total": self.total,
        }


@dataclass(frozen=True)
class MonthlySummary:
    """Income and expense totals for a calendar month.

    Attributes:
        month: Month label formatted as YYYY-MM.
        total_income: Sum of positive amounts.
        total_expenses: Sum of negative amounts; negative or zero.
        net: total_income plus total_expenses.
        expense_breakdown: Per-category expenses, most negative first.
    """

    month: str
    total_income: Decimal
    total_expenses: Decimal
    net: Decimal
    expense_breakdown: tuple[ExpenseBreakdownItem, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "month": self.month,
            "totalIncome": self.total_income,
            "totalExpenses": self.total_expenses,
            "net": self.net,
            "expenseBreakdown": [
                item.to_dict() for item in self.expense_breakdown
            ],
        }


@dataclass(frozen=True)
class NetWorthPoint:
    """Net worth value for a single bucket."""

    date: date
    net_worth: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": format_date(self.date),
            "netWorth": self.net_worth,
        }


@dataclass(frozen=True)
class AccountBalanceSummary:
    """Account with its most recent recorded balance, if any."""

    account_id: str
    name: str
    account_type: str | None
    is_liability: bool
    latest_balance: Decimal | None = None
    latest_balance_date: date | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.account_id,
            "name": self.name,
            "type": self.account_type,
            "isLiability": self.is_liability,
            "latestBalance": self.latest_balance,
            "latestBalanceDate": (
                format_date(self.latest_balance_date)
                if self.latest_balance_date
                else None
            ),
        }


@dataclass(frozen=True)
class CategoryActivity:
    """All-time transaction total and count for one category name."""

    category_name: str
    total: Decimal
    count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "categoryName": self.category_name,
            "total": self.total,
            "count": self.count,
        }


@dataclass(frozen=True)
class FinancialContext:
    """Per-user snapshot of accounts, cash flow and categories.

    Attributes:
        accounts: Accounts ordered by name with their latest balances.
        total_balance: Latest asset balances minus latest liability
            balances; accounts without snapshots contribute nothing.
        transaction_count: Number of transactions on record.
        total_income: Sum of positive amounts.
        total_expenses: Sum of negative amounts; negative or zero.
        net: total_income plus total_expenses.
        earliest_date: Date of the first transaction, if any.
        latest_date: Date of the last transaction, if any.
        category_breakdown: Per-category totals, most negative first.
        category_names: Names of the user's categories in name order.
    """

    accounts: tuple[AccountBalanceSummary, ...]
    total_balance: Decimal
    transaction_count: int
    total_income: Decimal
    total_expenses: Decimal
    net: Decimal
    earliest_date: date | None
    latest_date: date | None
    category_breakdown: tuple[CategoryActivity, ...]
    category_names: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "accounts": {
                "totalAccounts": len(self.accounts),
                "totalBalance": self.total_balance,
                "items": [account.to_dict() for account in self.accounts],
            },
            "transactions": {
                "totalCount": self.transaction_count,
                "totalIncome": self.total_income,
                "totalExpenses": self.total_expenses,
                "netCashFlow": self.net,
                "earliestDate": (
                    format_date(self.earliest_date)
                    if self.earliest_date
                    else None
                ),
                "latestDate": (
                    format_date(self.latest_date) if self.latest_date else None
                ),
                "categoryBreakdown": [
                    item.to_dict() for item in self.category_breakdown
                ],
            },
            "categories": {
                "totalCategories": len(self.category_names),
                "categoryNames": list(self.category_names),
            },
        }


__all__ = [
    "AccountBalanceSummary",
    "CategoryActivity",
    "ExpenseBreakdownItem",
    "FinancialContext",
    "MonthlySummary",
    "NetWorthPoint",
]
