"""Use case to gather a user's whole financial picture in one read."""

from datetime import date

from finance_tracker.application.ports.finance_repository import (
    FinanceRepositoryPort,
)
from finance_tracker.domain.models import FinancialContext
from finance_tracker.domain.services.finance import compute_financial_context
from finance_tracker.infrastructure.logging.logger import get_app_logger

# Bounds passed to the range queries to cover the full history.
HISTORY_START = date.min
HISTORY_END = date.max


class GetFinancialContextUseCase:
    """Summarize accounts, transactions and categories for one user."""

    def __init__(
        self,
        finance_repository: FinanceRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            finance_repository: Port providing per-user finance rows.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._finance_repository = finance_repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str) -> FinancialContext:
        """Return the aggregated context over the user's full history.

        Args:
            user_id: Owning user key; every query is filtered by it.

        Returns:
            FinancialContext: Latest balances, cash flow totals and
            category activity.
        """
        accounts = self._finance_repository.fetch_accounts(user_id)
        snapshots = self._finance_repository.fetch_snapshot_balances(
            user_id,
            HISTORY_START,
            HISTORY_END,
        )
        transactions = self._finance_repository.fetch_transactions(
            user_id,
            HISTORY_START,
            HISTORY_END,
        )
        categories = self._finance_repository.fetch_categories(user_id)
        self._logger.info(
            f"Fetched {len(accounts)} accounts, {len(snapshots)} snapshots, "
            f"{len(transactions)} transactions and "
            f"{len(categories)} categories"
        )

        context = compute_financial_context(
            accounts,
            snapshots,
            transactions,
            categories,
            logger=self._logger,
        )
        self._logger.info(
            f"Financial context computed: balance={context.total_balance}, "
            f"net={context.net}"
        )
        return context


__all__ = ["GetFinancialContextUseCase", "FinancialContext"]
