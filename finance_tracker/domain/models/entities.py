"""Domain models for persisted finance entities."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Account:
    """Account owned by a user.

    Attributes:
        id: Opaque account identifier.
        name: Display name.
        account_type: Optional free-text tag such as "bank" or "credit".
        is_liability: Whether balances count negatively toward net worth.
        user_id: Owning user key.
    """

    id: str
    name: str
    account_type: str | None
    is_liability: bool
    user_id: str


@dataclass(frozen=True)
class AccountSnapshot:
    """Balance of an account on a given calendar date."""

    id: str
    account_id: str
    snapshot_date: date
    balance: Decimal
    user_id: str


@dataclass(frozen=True)
class Category:
    """Transaction category owned by a user."""

    id: int
    name: str
    category_type: str | None
    user_id: str


@dataclass(frozen=True)
class Transaction:
    """Signed money movement; positive amounts are income."""

    id: int
    amount: Decimal
    transaction_date: date
    category_id: int
    description: str | None
    user_id: str


__all__ = ["Account", "AccountSnapshot", "Category", "Transaction"]
