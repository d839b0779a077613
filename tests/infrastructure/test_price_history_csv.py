"""Tests for the price history CSV reader."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.infrastructure.price_history_csv import read_price_history_csv


def test_reads_rows_and_skips_bad_lines(tmp_path) -> None:
    path = tmp_path / "history.csv"
    path.write_text(
        "Date,LKR_per_Oz\n"
        "2024-06-01,\"700,000.50\"\n"
        "03/06/2024,701000\n"
        "not-a-date,1\n"
        "2024-06-04,abc\n",
        encoding="utf-8",
    )
    logger = MagicMock()

    records = read_price_history_csv(path, logger=logger)

    assert [record.price_date for record in records] == [
        date(2024, 6, 1),
        date(2024, 6, 3),
    ]
    assert records[0].price_per_troy_ounce_lkr == Decimal("700000.50")
    assert logger.warning.call_count == 2


def test_missing_columns_raise(tmp_path) -> None:
    path = tmp_path / "history.csv"
    path.write_text("day,price\n2024-06-01,1\n", encoding="utf-8")

    with pytest.raises(RuntimeError):
        read_price_history_csv(path, logger=MagicMock())
