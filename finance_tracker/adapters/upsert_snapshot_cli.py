"""CLI adapter recording an account balance snapshot.

Inputs come from the environment: FINANCE_USER_ID, SNAPSHOT_ACCOUNT_ID,
SNAPSHOT_DATE (YYYY-MM-DD, defaults to today) and SNAPSHOT_BALANCE.
"""

from datetime import date
import os

from finance_tracker.adapters.serialization import to_json
from finance_tracker.domain.errors import InvalidArgumentError, NotFoundError
from finance_tracker.infrastructure.container import (
    build_upsert_snapshot_use_case,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.infrastructure.settings import FinanceSettings


def main() -> None:
    """Upsert the configured snapshot and print the stored record."""
    logger = get_app_logger()
    settings = FinanceSettings.from_env()
    account_id = os.getenv("SNAPSHOT_ACCOUNT_ID")
    balance = os.getenv("SNAPSHOT_BALANCE")
    if not settings.user_id or not account_id or balance is None:
        logger.warning(
            "FINANCE_USER_ID, SNAPSHOT_ACCOUNT_ID and SNAPSHOT_BALANCE "
            "are required."
        )
        return

    snapshot_date = os.getenv("SNAPSHOT_DATE") or date.today()
    use_case = build_upsert_snapshot_use_case()
    try:
        snapshot = use_case.execute(
            settings.user_id,
            account_id,
            snapshot_date,
            balance,
        )
    except (InvalidArgumentError, NotFoundError) as exc:
        logger.error(str(exc))
        return

    print(
        to_json(
            {
                "id": snapshot.id,
                "accountId": snapshot.account_id,
                "date": snapshot.snapshot_date,
                "balance": snapshot.balance,
            }
        )
    )


if __name__ == "__main__":  # pragma: no cover
    main()
