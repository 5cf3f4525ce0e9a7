"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from finance_tracker.domain.services.bucketing import normalize_interval
from finance_tracker.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class FinanceSettings:
    """Settings shared by the CLIs and the dashboard.

    Attributes:
        user_id: Default owning user key, or None when not configured.
        default_interval: Net worth bucketing interval (day, week, month).
    """

    user_id: str | None = None
    default_interval: str = "month"

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from environment variables.

        Returns:
            FinanceSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        raw_user = os.getenv("FINANCE_USER_ID", "").strip()
        raw_interval = os.getenv("NET_WORTH_INTERVAL", "month")
        interval = normalize_interval(raw_interval)
        if raw_interval.strip().lower() != interval:
            get_app_logger().warning(
                f"Unsupported NET_WORTH_INTERVAL '{raw_interval}'; "
                f"using {interval}"
            )
        return cls(user_id=raw_user or None, default_interval=interval)

    def require_user_id(self) -> str:
        """Return the configured user key.

        Raises:
            RuntimeError: If FINANCE_USER_ID is not set.
        """
        if not self.user_id:
            raise RuntimeError("Missing environment variable: FINANCE_USER_ID")
        return self.user_id


__all__ = ["FinanceSettings"]
