"""Application ports package."""

from .database import DatabaseEnginePort
from .finance_repository import FinanceRepositoryPort
from .snapshots_repository import AccountSnapshotsPort

__all__ = [
    "AccountSnapshotsPort",
    "DatabaseEnginePort",
    "FinanceRepositoryPort",
]
