"""DDL for the finance tables.

The statements are portable between PostgreSQL and SQLite.
"""

from sqlalchemy.engine import Engine


CREATE_ACCOUNTS_SQL = """
CREATE TABLE IF NOT EXISTS accounts (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    name VARCHAR(100) NOT NULL,
    account_type VARCHAR(30),
    is_liability BOOLEAN NOT NULL DEFAULT FALSE,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
)
"""

CREATE_ACCOUNT_SNAPSHOTS_SQL = """
CREATE TABLE IF NOT EXISTS account_snapshots (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    account_id TEXT NOT NULL REFERENCES accounts (id) ON DELETE CASCADE,
    snapshot_date DATE NOT NULL,
    balance NUMERIC(18, 2) NOT NULL,
    UNIQUE (account_id, snapshot_date)
)
"""

CREATE_CATEGORIES_SQL = """
CREATE TABLE IF NOT EXISTS categories (
    id INTEGER PRIMARY KEY,
    user_id TEXT NOT NULL,
    name VARCHAR(50) NOT NULL,
    category_type VARCHAR(20)
)
"""

CREATE_CATEGORIES_NAME_INDEX_SQL = """
CREATE UNIQUE INDEX IF NOT EXISTS ux_categories_user_name
ON categories (user_id, lower(name))
"""

CREATE_TRANSACTIONS_SQL = """
CREATE TABLE IF NOT EXISTS transactions (
    id INTEGER PRIMARY KEY,
    user_id TEXT NOT NULL,
    amount NUMERIC(18, 2) NOT NULL CHECK (amount <> 0),
    transaction_date DATE NOT NULL,
    category_id INTEGER NOT NULL REFERENCES categories (id),
    description VARCHAR(200)
)
"""

CREATE_INDEXES_SQL = (
    "CREATE INDEX IF NOT EXISTS ix_snapshots_user_date "
    "ON account_snapshots (user_id, snapshot_date)",
    "CREATE INDEX IF NOT EXISTS ix_transactions_user_date "
    "ON transactions (user_id, transaction_date)",
)

SCHEMA_STATEMENTS = (
    CREATE_ACCOUNTS_SQL,
    CREATE_ACCOUNT_SNAPSHOTS_SQL,
    CREATE_CATEGORIES_SQL,
    CREATE_CATEGORIES_NAME_INDEX_SQL,
    CREATE_TRANSACTIONS_SQL,
    *CREATE_INDEXES_SQL,
)


def create_schema(engine: Engine) -> None:
    """Create the finance tables when they do not exist yet.

    Args:
        engine: Engine connected to the finance database.
    """
    with engine.begin() as conn:
        for statement in SCHEMA_STATEMENTS:
            conn.exec_driver_sql(statement)


__all__ = ["SCHEMA_STATEMENTS", "create_schema"]
