"""SQLAlchemy-backed repository for per-user finance data."""

from datetime import date
from decimal import Decimal
import uuid

from sqlalchemy import Date, Numeric, bindparam, text

from finance_tracker.application.ports.database import DatabaseEnginePort
from finance_tracker.application.ports.finance_repository import (
    FinanceRepositoryPort,
)
from finance_tracker.application.ports.snapshots_repository import (
    AccountSnapshotsPort,
)
from finance_tracker.domain.errors import NotFoundError
from finance_tracker.domain.models import (
    Account,
    AccountSnapshot,
    Category,
    SnapshotBalanceRow,
    TransactionRow,
)
from finance_tracker.utils.date_utils import coerce_date
from finance_tracker.utils.decimal_utils import coerce_decimal


SELECT_TRANSACTIONS_SQL = text(
    """
    SELECT amount, transaction_date, category_id
    FROM transactions
    WHERE user_id = :user_id
      AND transaction_date >= :start_date
      AND transaction_date < :end_date
    """
).bindparams(
    bindparam("start_date", type_=Date),
    bindparam("end_date", type_=Date),
)

SELECT_CATEGORIES_SQL = text(
    """
    SELECT id, name, category_type, user_id
    FROM categories
    WHERE user_id = :user_id
    """
)

SELECT_SNAPSHOT_BALANCES_SQL = text(
    """
    SELECT s.account_id AS account_id,
           s.snapshot_date AS snapshot_date,
           s.balance AS balance,
           a.is_liability AS is_liability
    FROM account_snapshots s
    JOIN accounts a ON a.id = s.account_id AND a.user_id = s.user_id
    WHERE s.user_id = :user_id
      AND s.snapshot_date >= :start_date
      AND s.snapshot_date <= :end_date
    """
).bindparams(
    bindparam("start_date", type_=Date),
    bindparam("end_date", type_=Date),
)

SELECT_ACCOUNTS_SQL = text(
    """
    SELECT id, name, account_type, is_liability, user_id
    FROM accounts
    WHERE user_id = :user_id
    """
)

SELECT_ACCOUNT_ID_SQL = text(
    """
    SELECT id
    FROM accounts
    WHERE id = :account_id AND user_id = :user_id
    """
)

UPSERT_SNAPSHOT_SQL = text(
    """
    INSERT INTO account_snapshots (
        id,
        user_id,
        account_id,
        snapshot_date,
        balance
    )
    VALUES (
        :id,
        :user_id,
        :account_id,
        :snapshot_date,
        :balance
    )
    ON CONFLICT (account_id, snapshot_date)
    DO UPDATE SET balance = excluded.balance
    """
).bindparams(
    bindparam("snapshot_date", type_=Date),
    bindparam("balance", type_=Numeric(18, 2)),
)

SELECT_SNAPSHOT_SQL = text(
    """
    SELECT id, account_id, snapshot_date, balance, user_id
    FROM account_snapshots
    WHERE account_id = :account_id
      AND user_id = :user_id
      AND snapshot_date = :snapshot_date
    """
).bindparams(bindparam("snapshot_date", type_=Date))


class SqlAlchemyFinanceRepository(FinanceRepositoryPort, AccountSnapshotsPort):
    """Repository backed by SQLAlchemy for accounts, snapshots and
    transactions."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def fetch_transactions(
        self,
        user_id: str,
        start_date: date,
        end_date: date,
    ) -> list[TransactionRow]:
        params = {
            "user_id": user_id,
            "start_date": start_date,
            "end_date": end_date,
        }
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_TRANSACTIONS_SQL, params).all()
        transactions = [
            TransactionRow(
                amount=coerce_decimal(row.amount),
                transaction_date=coerce_date(row.transaction_date),
                category_id=row.category_id,
            )
            for row in rows
        ]
        return sorted(
            transactions,
            key=lambda row: (row.transaction_date, row.category_id),
        )

    def fetch_categories(self, user_id: str) -> list[Category]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_CATEGORIES_SQL,
                {"user_id": user_id},
            ).all()
        categories = [
            Category(
                id=row.id,
                name=row.name,
                category_type=row.category_type,
                user_id=row.user_id,
            )
            for row in rows
        ]
        return sorted(categories, key=lambda row: row.id)

    def fetch_snapshot_balances(
        self,
        user_id: str,
        start_date: date,
        end_date: date,
    ) -> list[SnapshotBalanceRow]:
        params = {
            "user_id": user_id,
            "start_date": start_date,
            "end_date": end_date,
        }
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_SNAPSHOT_BALANCES_SQL, params).all()
        balances = [
            SnapshotBalanceRow(
                account_id=str(row.account_id),
                snapshot_date=coerce_date(row.snapshot_date),
                balance=coerce_decimal(row.balance),
                is_liability=bool(row.is_liability),
            )
            for row in rows
        ]
        return sorted(
            balances,
            key=lambda row: (row.snapshot_date, row.account_id),
        )

    def fetch_accounts(self, user_id: str) -> list[Account]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_ACCOUNTS_SQL,
                {"user_id": user_id},
            ).all()
        accounts = [
            Account(
                id=str(row.id),
                name=row.name,
                account_type=row.account_type,
                is_liability=bool(row.is_liability),
                user_id=row.user_id,
            )
            for row in rows
        ]
        return sorted(accounts, key=lambda row: (row.name.lower(), row.id))

    def upsert_snapshot(
        self,
        user_id: str,
        account_id: str,
        snapshot_date: date,
        balance: Decimal,
    ) -> AccountSnapshot:
        keys = {
            "user_id": user_id,
            "account_id": account_id,
            "snapshot_date": snapshot_date,
        }
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            account = conn.execute(
                SELECT_ACCOUNT_ID_SQL,
                {"user_id": user_id, "account_id": account_id},
            ).first()
            if account is None:
                raise NotFoundError(f"Account not found: {account_id}")
            conn.execute(
                UPSERT_SNAPSHOT_SQL,
                {**keys, "id": str(uuid.uuid4()), "balance": balance},
            )
            row = conn.execute(SELECT_SNAPSHOT_SQL, keys).one()
        return AccountSnapshot(
            id=str(row.id),
            account_id=str(row.account_id),
            snapshot_date=coerce_date(row.snapshot_date),
            balance=coerce_decimal(row.balance),
            user_id=row.user_id,
        )


__all__ = [
    "SqlAlchemyFinanceRepository",
    "SELECT_TRANSACTIONS_SQL",
    "SELECT_CATEGORIES_SQL",
    "SELECT_SNAPSHOT_BALANCES_SQL",
    "SELECT_ACCOUNTS_SQL",
    "UPSERT_SNAPSHOT_SQL",
]
