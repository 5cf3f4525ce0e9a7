"""CLI adapter creating the finance tables in the configured database."""

from finance_tracker.infrastructure.container import build_database_adapter
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.infrastructure.schema import create_schema


def main() -> None:
    """Create missing finance tables."""
    logger = get_app_logger()
    adapter = build_database_adapter()
    engine = adapter.get_engine()

    create_schema(engine)

    logger.info(f"Schema ready on {engine.url}")


if __name__ == "__main__":  # pragma: no cover
    main()
