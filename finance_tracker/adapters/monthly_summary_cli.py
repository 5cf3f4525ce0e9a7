"""CLI adapter printing the monthly summary as JSON.

Inputs come from the environment: FINANCE_USER_ID and REPORT_MONTH
(YYYY-MM, defaults to the current month).
"""

from datetime import date
import os

from finance_tracker.adapters.serialization import to_json
from finance_tracker.domain.errors import InvalidArgumentError
from finance_tracker.infrastructure.container import (
    build_monthly_summary_use_case,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.infrastructure.settings import FinanceSettings


def main() -> None:
    """Compute and print the monthly summary for the configured user."""
    logger = get_app_logger()
    settings = FinanceSettings.from_env()
    if not settings.user_id:
        logger.warning("FINANCE_USER_ID is required to compute a summary.")
        return

    month = os.getenv("REPORT_MONTH") or date.today().strftime("%Y-%m")
    use_case = build_monthly_summary_use_case()
    try:
        summary = use_case.execute(settings.user_id, month)
    except InvalidArgumentError as exc:
        logger.error(str(exc))
        return

    print(to_json(summary.to_dict()))


if __name__ == "__main__":  # pragma: no cover
    main()
