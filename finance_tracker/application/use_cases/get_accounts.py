"""Use case to read a user's accounts for presentation layers."""

from finance_tracker.application.ports.finance_repository import (
    FinanceRepositoryPort,
)
from finance_tracker.domain.models import Account


class GetAccountsUseCase:
    """Fetch the accounts owned by a user."""

    def __init__(self, finance_repository: FinanceRepositoryPort) -> None:
        """Initialize the use case with its required dependencies."""
        self._finance_repository = finance_repository

    def execute(self, user_id: str) -> list[Account]:
        """Return the user's accounts sorted by name."""
        accounts = self._finance_repository.fetch_accounts(user_id)
        return sorted(
            accounts,
            key=lambda account: (account.name.lower(), account.id),
        )


__all__ = ["GetAccountsUseCase", "Account"]
