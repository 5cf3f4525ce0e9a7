"""Use case to compute a bucketed net worth time series."""

from datetime import date

from finance_tracker.application.ports.finance_repository import (
    FinanceRepositoryPort,
)
from finance_tracker.domain.models import NetWorthPoint
from finance_tracker.domain.services.bucketing import normalize_interval
from finance_tracker.domain.services.finance import compute_net_worth_series
from finance_tracker.domain.services.validation import (
    parse_iso_date,
    validate_date_range,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger


class GetNetWorthSeriesUseCase:
    """Compute net worth per day, week or month from balance snapshots."""

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

    def execute(
        self,
        user_id: str,
        from_date: date | str,
        to_date: date | str,
        interval: str | None = None,
    ) -> list[NetWorthPoint]:
        """Return net worth points sorted by bucket start date.

        Args:
            user_id: Owning user key; every query is filtered by it.
            from_date: Inclusive lower bound of snapshot dates.
            to_date: Inclusive upper bound of snapshot dates.
            interval: day, week or month; anything else means month.

        Returns:
            list[NetWorthPoint]: One point per bucket holding snapshots.

        Raises:
            InvalidArgumentError: If a date is malformed or the range is
                reversed.
        """
        start_date = parse_iso_date(from_date, "from")
        end_date = parse_iso_date(to_date, "to")
        validate_date_range(start_date, end_date)
        resolved_interval = normalize_interval(interval)

        rows = self._finance_repository.fetch_snapshot_balances(
            user_id,
            start_date,
            end_date,
        )
        self._logger.info(
            f"Fetched {len(rows)} snapshots between {start_date} "
            f"and {end_date}"
        )

        points = compute_net_worth_series(
            rows,
            resolved_interval,
            logger=self._logger,
        )
        self._logger.info(
            f"Net worth series computed: {len(points)} "
            f"{resolved_interval} buckets"
        )
        return points


__all__ = ["GetNetWorthSeriesUseCase", "NetWorthPoint"]
