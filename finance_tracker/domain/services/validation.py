"""Domain validation helpers."""

from datetime import date, datetime
from decimal import Decimal
from logging import Logger

from finance_tracker.domain.constants import MAX_BALANCE_MAGNITUDE
from finance_tracker.domain.errors import InvalidArgumentError
from finance_tracker.domain.models import SnapshotBalanceRow
from finance_tracker.utils.decimal_utils import coerce_decimal


def parse_month(month: str | None) -> tuple[str, date, date]:
    """Parse a YYYY-MM label into its half-open date range.

    Args:
        month: Month label such as "2025-12".

    Returns:
        tuple[str, date, date]: Normalized label, first day of the month and
        first day of the following month.

    Raises:
        InvalidArgumentError: If the label is missing or unparsable.
    """
    if month is None or not str(month).strip():
        raise InvalidArgumentError("month is required in format YYYY-MM")
    try:
        parsed = datetime.strptime(str(month).strip(), "%Y-%m").date()
    except ValueError as exc:
        raise InvalidArgumentError("Invalid month. Use YYYY-MM.") from exc
    start = parsed.replace(day=1)
    if start.month < 12:
        end = date(start.year, start.month + 1, 1)
    elif start.year < date.max.year:
        end = date(start.year + 1, 1, 1)
    else:
        raise InvalidArgumentError("Invalid month. Use YYYY-MM.")
    return start.strftime("%Y-%m"), start, end


def parse_iso_date(value: date | str | None, field_name: str) -> date:
    """Parse a YYYY-MM-DD value, passing dates through unchanged.

    Raises:
        InvalidArgumentError: If the value is missing or malformed.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if value is None or not str(value).strip():
        raise InvalidArgumentError(f"{field_name} is required in format YYYY-MM-DD")
    try:
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
    except ValueError as exc:
        raise InvalidArgumentError(
            f"Invalid {field_name}. Use YYYY-MM-DD."
        ) from exc


def validate_date_range(start_date: date, end_date: date) -> None:
    """Reject ranges whose end precedes their start.

    Raises:
        InvalidArgumentError: If ``end_date`` is before ``start_date``.
    """
    if end_date < start_date:
        raise InvalidArgumentError(
            f"'to' ({end_date.isoformat()}) must be on or after "
            f"'from' ({start_date.isoformat()})"
        )


def validate_snapshot_balance(balance) -> Decimal:
    """Coerce a snapshot balance and check its magnitude.

    Raises:
        InvalidArgumentError: If the value is not numeric or out of range.
    """
    try:
        amount = coerce_decimal(balance)
    except ValueError as exc:
        raise InvalidArgumentError(f"Invalid balance: {balance!r}") from exc
    if not amount.is_finite() or abs(amount) >= MAX_BALANCE_MAGNITUDE:
        raise InvalidArgumentError(
            f"Balance must be a finite amount below {MAX_BALANCE_MAGNITUDE} "
            "in magnitude"
        )
    return amount


def validate_balance_sign(row: SnapshotBalanceRow, logger: Logger) -> None:
    """Warn when a snapshot balance violates expected sign conventions.

    Liability balances are recorded as positive amounts owed.

    Args:
        row: Snapshot row joined with its account liability flag.
        logger: Logger used for warnings.
    """
    if row.is_liability and row.balance < 0:
        logger.warning(
            f"Liability balance is negative for account={row.account_id} "
            f"on {row.snapshot_date}: {row.balance}"
        )
    if not row.is_liability and row.balance < 0:
        logger.warning(
            f"Asset balance is negative for account={row.account_id} "
            f"on {row.snapshot_date}: {row.balance}"
        )


__all__ = [
    "parse_month",
    "parse_iso_date",
    "validate_date_range",
    "validate_snapshot_balance",
    "validate_balance_sign",
]
