"""CLI adapter printing the net worth series as JSON.

Inputs come from the environment: FINANCE_USER_ID, NET_WORTH_FROM and
NET_WORTH_TO (YYYY-MM-DD) and NET_WORTH_INTERVAL (day, week or month).
The range defaults to January 1st of the current year through today.
"""

from datetime import date
import os

from finance_tracker.adapters.serialization import to_json
from finance_tracker.domain.errors import InvalidArgumentError
from finance_tracker.infrastructure.container import (
    build_net_worth_series_use_case,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.infrastructure.settings import FinanceSettings


def main() -> None:
    """Compute and print the net worth series for the configured user."""
    logger = get_app_logger()
    settings = FinanceSettings.from_env()
    if not settings.user_id:
        logger.warning("FINANCE_USER_ID is required to compute net worth.")
        return

    today = date.today()
    from_date = os.getenv("NET_WORTH_FROM") or date(today.year, 1, 1)
    to_date = os.getenv("NET_WORTH_TO") or today

    use_case = build_net_worth_series_use_case()
    try:
        points = use_case.execute(
            settings.user_id,
            from_date,
            to_date,
            interval=settings.default_interval,
        )
    except InvalidArgumentError as exc:
        logger.error(str(exc))
        return

    print(to_json([point.to_dict() for point in points]))


if __name__ == "__main__":  # pragma: no cover
    main()
