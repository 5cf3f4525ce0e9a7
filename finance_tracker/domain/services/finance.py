"""Domain services for finance aggregates."""

from collections.abc import Iterable, Mapping
from datetime import date
from decimal import Decimal
from logging import Logger

from finance_tracker.domain.constants import UNKNOWN_CATEGORY_NAME
from finance_tracker.domain.models import (
    Account,
    AccountBalanceSummary,
    Category,
    CategoryActivity,
    ExpenseBreakdownItem,
    FinancialContext,
    MonthlySummary,
    NetWorthPoint,
    SnapshotBalanceRow,
    TransactionRow,
)
from finance_tracker.domain.services.bucketing import (
    bucket_start,
    normalize_interval,
)
from finance_tracker.domain.services.validation import validate_balance_sign
from finance_tracker.utils.decimal_utils import coerce_decimal


def compute_monthly_summary(
    month: str,
    transactions: Iterable[TransactionRow],
    category_names: Mapping[int, str],
    *,
    logger: Logger | None = None,
) -> MonthlySummary:
    """Compute income, expense totals and the expense breakdown.

    Income and expenses are inferred from the amount sign only. Expense
    totals stay negative.

    Args:
        month: Normalized month label (YYYY-MM).
        transactions: Transactions already restricted to the month.
        category_names: Category names keyed by category id.
        logger: Optional logger used for the unknown-category warning.

    Returns:
        MonthlySummary: Totals and breakdown, most negative category first.
    """
    total_income = Decimal("0")
    total_expenses = Decimal("0")
    expenses_by_category: dict[int, Decimal] = {}

    for row in transactions:
        amount = coerce_decimal(row.amount)
        if amount > 0:
            total_income += amount
        elif amount < 0:
            total_expenses += amount
            expenses_by_category[row.category_id] = (
                expenses_by_category.get(row.category_id, Decimal("0"))
                + amount
            )

    breakdown = []
    for category_id, total in expenses_by_category.items():
        name = category_names.get(category_id)
        if name is None:
            if logger is not None:
                logger.warning(
                    f"Category {category_id} not found; "
                    f"reporting as {UNKNOWN_CATEGORY_NAME}"
                )
            name = UNKNOWN_CATEGORY_NAME
        breakdown.append(
            ExpenseBreakdownItem(
                category_id=category_id,
                category_name=name,
                total=total,
            )
        )
    breakdown.sort(key=lambda item: (item.total, item.category_id))

    return MonthlySummary(
        month=month,
        total_income=total_income,
        total_expenses=total_expenses,
        net=total_income + total_expenses,
        expense_breakdown=tuple(breakdown),
    )


def compute_net_worth_series(
    rows: Iterable[SnapshotBalanceRow],
    interval: str | None,
    *,
    logger: Logger | None = None,
) -> list[NetWorthPoint]:
    """Compute one net worth point per bucket.

    Each account contributes only its latest snapshot within a bucket.
    Liability balances are subtracted. Buckets without snapshots are
    omitted.

    Args:
        rows: Snapshot rows already restricted to the requested range.
        interval: Bucketing interval (day, week or month).
        logger: Optional logger used for sign warnings.

    Returns:
        list[NetWorthPoint]: Points sorted by bucket start date.
    """
    resolved_interval = normalize_interval(interval)

    latest: dict[tuple[date, str], SnapshotBalanceRow] = {}
    for row in rows:
        key = (bucket_start(row.snapshot_date, resolved_interval), row.account_id)
        current = latest.get(key)
        if current is None or row.snapshot_date > current.snapshot_date:
            latest[key] = row

    totals: dict[date, Decimal] = {}
    for (bucket, _account_id), row in latest.items():
        if logger is not None:
            validate_balance_sign(row, logger)
        balance = coerce_decimal(row.balance)
        signed = -balance if row.is_liability else balance
        totals[bucket] = totals.get(bucket, Decimal("0")) + signed

    return [
        NetWorthPoint(date=bucket, net_worth=totals[bucket])
        for bucket in sorted(totals)
    ]


def _latest_snapshots(
    rows: Iterable[SnapshotBalanceRow],
) -> dict[str, SnapshotBalanceRow]:
    latest: dict[str, SnapshotBalanceRow] = {}
    for row in rows:
        current = latest.get(row.account_id)
        if current is None or row.snapshot_date > current.snapshot_date:
            latest[row.account_id] = row
    return latest


def compute_financial_context(
    accounts: Iterable[Account],
    snapshots: Iterable[SnapshotBalanceRow],
    transactions: Iterable[TransactionRow],
    categories: Iterable[Category],
    *,
    logger: Logger | None = None,
) -> FinancialContext:
    """Summarize a user's accounts, cash flow and categories.

    The account total uses each account's latest snapshot and subtracts
    liabilities, the same sign rule as the net worth series. Category
    totals cover income and expenses together and are grouped by name.

    Args:
        accounts: Accounts owned by the user.
        snapshots: Every snapshot recorded for those accounts.
        transactions: Every transaction recorded for the user.
        categories: Categories owned by the user.
        logger: Optional logger used for sign and unknown-category warnings.

    Returns:
        FinancialContext: Aggregated view over the user's full history.
    """
    latest = _latest_snapshots(snapshots)
    ordered_accounts = sorted(
        accounts,
        key=lambda account: (account.name.lower(), account.id),
    )

    account_items = []
    total_balance = Decimal("0")
    for account in ordered_accounts:
        row = latest.get(account.id)
        if row is None:
            account_items.append(
                AccountBalanceSummary(
                    account_id=account.id,
                    name=account.name,
                    account_type=account.account_type,
                    is_liability=account.is_liability,
                )
            )
            continue
        if logger is not None:
            validate_balance_sign(row, logger)
        balance = coerce_decimal(row.balance)
        total_balance += -balance if account.is_liability else balance
        account_items.append(
            AccountBalanceSummary(
                account_id=account.id,
                name=account.name,
                account_type=account.account_type,
                is_liability=account.is_liability,
                latest_balance=balance,
                latest_balance_date=row.snapshot_date,
            )
        )

    names_by_id = {category.id: category.name for category in categories}

    transaction_count = 0
    total_income = Decimal("0")
    total_expenses = Decimal("0")
    earliest: date | None = None
    latest_date: date | None = None
    activity: dict[str, tuple[Decimal, int]] = {}
    missing_ids: set[int] = set()
    for row in transactions:
        amount = coerce_decimal(row.amount)
        transaction_count += 1
        if amount > 0:
            total_income += amount
        elif amount < 0:
            total_expenses += amount
        if earliest is None or row.transaction_date < earliest:
            earliest = row.transaction_date
        if latest_date is None or row.transaction_date > latest_date:
            latest_date = row.transaction_date

        name = names_by_id.get(row.category_id)
        if name is None:
            missing_ids.add(row.category_id)
            name = UNKNOWN_CATEGORY_NAME
        total, count = activity.get(name, (Decimal("0"), 0))
        activity[name] = (total + amount, count + 1)

    if missing_ids and logger is not None:
        logger.warning(
            f"Categories {sorted(missing_ids)} not found; "
            f"reporting as {UNKNOWN_CATEGORY_NAME}"
        )

    breakdown = sorted(
        (
            CategoryActivity(category_name=name, total=total, count=count)
            for name, (total, count) in activity.items()
        ),
        key=lambda item: (item.total, item.category_name),
    )

    return FinancialContext(
        accounts=tuple(account_items),
        total_balance=total_balance,
        transaction_count=transaction_count,
        total_income=total_income,
        total_expenses=total_expenses,
        net=total_income + total_expenses,
        earliest_date=earliest,
        latest_date=latest_date,
        category_breakdown=tuple(breakdown),
        category_names=tuple(
            sorted(names_by_id.values(), key=lambda name: (name.lower(), name))
        ),
    )


__all__ = [
    "compute_financial_context",
    "compute_monthly_summary",
    "compute_net_worth_series",
]
