"""Port for read access to per-user finance data."""

from datetime import date
from typing import Protocol

from finance_tracker.domain.models import (
    Account,
    Category,
    SnapshotBalanceRow,
    TransactionRow,
)


class FinanceRepositoryPort(Protocol):
    """Port exposing the query results the aggregators consume.

    Every method is scoped by the owning user key.
    """

    def fetch_transactions(
        self,
        user_id: str,
        start_date: date,
        end_date: date,
    ) -> list[TransactionRow]:
        """Return transactions dated in ``[start_date, end_date)``."""

    def fetch_categories(self, user_id: str) -> list[Category]:
        """Return the categories owned by the user."""

    def fetch_snapshot_balances(
        self,
        user_id: str,
        start_date: date,
        end_date: date,
    ) -> list[SnapshotBalanceRow]:
        """Return snapshots dated in ``[start_date, end_date]``."""

    def fetch_accounts(self, user_id: str) -> list[Account]:
        """Return the accounts owned by the user."""


__all__ = ["FinanceRepositoryPort"]
