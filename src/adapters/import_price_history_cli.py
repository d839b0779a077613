"""CLI adapter to backfill the gold price history from a CSV file."""

import sys
from pathlib import Path

from src.application.use_cases.import_price_history import (
    ImportPriceHistoryUseCase,
)
from src.infrastructure.container import build_price_repository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.price_history_csv import read_price_history_csv
from src.infrastructure.settings import GoldNestSettings


def _resolve_path(argv: list[str]) -> Path | None:
    """Return the CSV path from the arguments or the settings."""
    if argv:
        return Path(argv[0]).expanduser().resolve()
    return GoldNestSettings.from_env().price_history_csv


def main(argv: list[str] | None = None) -> int:
    """Import the CSV file and print the outcome."""
    logger = get_app_logger()
    path = _resolve_path(sys.argv[1:] if argv is None else argv)
    if path is None or not path.exists():
        logger.warning(
            "No price history file found. Pass a path or set "
            "GOLDNEST_PRICE_HISTORY_CSV."
        )
        return 1

    records = read_price_history_csv(path, logger=logger)
    use_case = ImportPriceHistoryUseCase(build_price_repository(), logger=logger)
    summary = use_case.execute(records)

    print(
        f"Imported {summary.inserted} prices "
        f"({summary.skipped} already present, {summary.rejected} rejected)."
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
