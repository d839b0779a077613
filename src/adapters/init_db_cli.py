"""CLI adapter to create the platform tables."""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.schema import SCHEMA_STATEMENTS, ensure_schema


def main() -> None:
    """Create missing tables in the configured database."""
    logger = get_app_logger()
    ensure_schema(build_database_adapter())
    logger.info(f"Schema ensured ({len(SCHEMA_STATEMENTS)} tables).")
    print("Database schema is up to date.")


if __name__ == "__main__":  # pragma: no cover
    main()
