"""Domain models for query rows consumed by the aggregators."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class TransactionRow:
    """Row representing a transaction for monthly aggregation."""

    amount: Decimal
    transaction_date: date
    category_id: int


@dataclass(frozen=True)
class SnapshotBalanceRow:
    """Row representing a snapshot joined with its account liability flag."""

    account_id: str
    snapshot_date: date
    balance: Decimal
    is_liability: bool


__all__ = ["TransactionRow", "SnapshotBalanceRow"]
