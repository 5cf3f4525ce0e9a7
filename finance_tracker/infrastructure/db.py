"""Database infrastructure for the finance tracker.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine connected to the finance database. It belongs to the infrastructure
layer because it deals with external systems (PostgreSQL or SQLite).
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool, StaticPool

from finance_tracker.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """Turn on foreign key enforcement so snapshot deletes cascade."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    PostgreSQL URLs get a small QueuePool with health checks. SQLite URLs
    get foreign keys switched on, and in-memory databases share a single
    connection through StaticPool so every checkout sees the same tables.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance for the finance store.
    """
    url = make_url(db_url)
    if url.get_backend_name() != "sqlite":
        return create_engine(
            db_url,
            poolclass=QueuePool,
            pool_size=5,
            max_overflow=5,
            pool_pre_ping=True,
            future=True,
        )

    options = {"future": True}
    if url.database in (None, "", ":memory:"):
        options["poolclass"] = StaticPool
        options["connect_args"] = {"check_same_thread": False}
    engine = create_engine(db_url, **options)
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the finance database.

    Returns:
        Engine: Lazily initialized engine built from FINANCE_DB_URL.
    """
    global _engine
    if _engine is None:
        db_url = _get_env_var("FINANCE_DB_URL")
        _engine = _create_engine(db_url)
    return _engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so application use cases can depend only on the protocol.
    """

    def get_engine(self) -> Engine:
        """Get the engine for the finance database.

        Returns:
            Engine: SQLAlchemy engine connected to the finance store.
        """
        return get_engine()


__all__ = [
    "get_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
