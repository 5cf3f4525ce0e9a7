"""Database port for the finance tracker."""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine behind the finance tables.

    Repositories receive this port so tests can hand them an in-memory
    SQLite engine while deployments point at PostgreSQL.
    """

    def get_engine(self) -> Engine:
        """Return the engine holding accounts, snapshots and transactions."""


__all__ = ["DatabaseEnginePort"]
