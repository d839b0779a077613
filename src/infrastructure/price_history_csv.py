"""Reader for historical price files with ``Date,LKR_per_Oz`` columns."""

import csv
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path

from src.domain.models.pricing import PriceRecord
from src.infrastructure.logging.logger import get_app_logger

DATE_COLUMN = "Date"
PRICE_COLUMN = "LKR_per_Oz"
_DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y", "%m/%d/%Y")


def _parse_date(raw: str) -> date:
    value = raw.strip()
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"Unrecognized date: {raw!r}")


def _parse_price(raw: str) -> Decimal:
    try:
        return Decimal(raw.strip().replace(",", ""))
    except InvalidOperation as exc:
        raise ValueError(f"Unrecognized price: {raw!r}") from exc


def read_price_history_csv(path: Path | str, logger=None) -> list[PriceRecord]:
    """Read price records from a CSV file.

    Rows with an unparseable date or price are skipped with a warning.

    Args:
        path: CSV file path.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        list[PriceRecord]: Parsed records in file order.

    Raises:
        RuntimeError: If the file lacks the expected columns.
    """
    resolved_logger = logger or get_app_logger()
    records = []
    with open(path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        columns = set(reader.fieldnames or [])
        if not {DATE_COLUMN, PRICE_COLUMN} <= columns:
            raise RuntimeError(
                f"{path} must have {DATE_COLUMN} and {PRICE_COLUMN} columns"
            )
        for line_number, row in enumerate(reader, start=2):
            try:
                records.append(
                    PriceRecord(
                        price_date=_parse_date(row[DATE_COLUMN] or ""),
                        price_per_troy_ounce_lkr=_parse_price(
                            row[PRICE_COLUMN] or ""
                        ),
                    )
                )
            except ValueError as exc:
                resolved_logger.warning(f"Skipping line {line_number}: {exc}")
    return records


__all__ = ["read_price_history_csv", "DATE_COLUMN", "PRICE_COLUMN"]
