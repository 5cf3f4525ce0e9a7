"""Use case to compute the monthly income and expense summary."""

from finance_tracker.application.ports.finance_repository import (
    FinanceRepositoryPort,
)
from finance_tracker.domain.models import MonthlySummary
from finance_tracker.domain.services.finance import compute_monthly_summary
from finance_tracker.domain.services.validation import parse_month
from finance_tracker.infrastructure.logging.logger import get_app_logger


class GetMonthlySummaryUseCase:
    """Compute income, expenses and category breakdown for a month."""

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

    def execute(self, user_id: str, month: str | None) -> MonthlySummary:
        """Return the summary for the given month.

        Args:
            user_id: Owning user key; every query is filtered by it.
            month: Month label formatted as YYYY-MM.

        Returns:
            MonthlySummary: Totals and the expense breakdown.

        Raises:
            InvalidArgumentError: If the month label is missing or invalid.
        """
        label, start_date, end_date = parse_month(month)

        transactions = self._finance_repository.fetch_transactions(
            user_id,
            start_date,
            end_date,
        )
        self._logger.info(
            f"Fetched {len(transactions)} transactions for {label}"
        )

        category_names: dict[int, str] = {}
        if any(row.amount < 0 for row in transactions):
            category_names = {
                category.id: category.name
                for category in self._finance_repository.fetch_categories(
                    user_id
                )
            }

        summary = compute_monthly_summary(
            label,
            transactions,
            category_names,
            logger=self._logger,
        )
        self._logger.info(
            f"Monthly summary computed for {label}: "
            f"income={summary.total_income}, "
            f"expenses={summary.total_expenses}, net={summary.net}"
        )
        return summary


__all__ = ["GetMonthlySummaryUseCase", "MonthlySummary"]
