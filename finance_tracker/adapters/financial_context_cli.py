"""CLI adapter printing the user's financial context as JSON."""

from finance_tracker.adapters.serialization import to_json
from finance_tracker.infrastructure.container import (
    build_financial_context_use_case,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.infrastructure.settings import FinanceSettings


def main() -> None:
    """Compute and print the financial context for the configured user."""
    logger = get_app_logger()
    settings = FinanceSettings.from_env()
    if not settings.user_id:
        logger.warning("FINANCE_USER_ID is required to build the context.")
        return

    context = build_financial_context_use_case().execute(settings.user_id)
    print(to_json(context.to_dict()))


if __name__ == "__main__":  # pragma: no cover
    main()
