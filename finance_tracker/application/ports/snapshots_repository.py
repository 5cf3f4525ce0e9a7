"""Port for writing account balance snapshots."""

from datetime import date
from decimal import Decimal
from typing import Protocol

from finance_tracker.domain.models import AccountSnapshot


class AccountSnapshotsPort(Protocol):
    """Port exposing snapshot upserts."""

    def upsert_snapshot(
        self,
        user_id: str,
        account_id: str,
        snapshot_date: date,
        balance: Decimal,
    ) -> AccountSnapshot:
        """Insert or overwrite the snapshot for an account and date.

        Raises:
            NotFoundError: If the account does not exist for the user.
        """


__all__ = ["AccountSnapshotsPort"]
