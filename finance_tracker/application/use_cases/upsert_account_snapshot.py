"""Use case to record an account balance for a calendar date."""

from datetime import date

from finance_tracker.application.ports.snapshots_repository import (
    AccountSnapshotsPort,
)
from finance_tracker.domain.models import AccountSnapshot
from finance_tracker.domain.services.validation import (
    parse_iso_date,
    validate_snapshot_balance,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger


class UpsertAccountSnapshotUseCase:
    """Create or overwrite the snapshot of an account on a date."""

    def __init__(
        self,
        snapshots_repository: AccountSnapshotsPort,
        logger=None,
    ) -> None:
        self._snapshots_repository = snapshots_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        account_id: str,
        snapshot_date: date | str,
        balance,
    ) -> AccountSnapshot:
        """Upsert the snapshot and return the stored record.

        Raises:
            InvalidArgumentError: If the date or balance is invalid.
            NotFoundError: If the account does not belong to the user.
        """
        resolved_date = parse_iso_date(snapshot_date, "date")
        amount = validate_snapshot_balance(balance)

        snapshot = self._snapshots_repository.upsert_snapshot(
            user_id,
            account_id,
            resolved_date,
            amount,
        )
        self._logger.info(
            f"Snapshot stored for account={account_id} "
            f"on {resolved_date}: {amount}"
        )
        return snapshot


__all__ = ["UpsertAccountSnapshotUseCase", "AccountSnapshot"]
