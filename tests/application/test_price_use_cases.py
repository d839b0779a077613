"""Tests for the market, quote and price ingestion use cases."""

from datetime import date, timedelta
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.get_market_summary import (
    GetMarketSummaryUseCase,
)
from src.application.use_cases.import_price_history import (
    ImportPriceHistoryUseCase,
)
from src.application.use_cases.quote_gold import QuoteGoldUseCase
from src.application.use_cases.record_daily_price import (
    RecordDailyPriceUseCase,
)
from src.domain.constants import TROY_OUNCE_TO_GRAMS
from src.domain.errors import PriceUnavailableError, ValidationError
from src.domain.models.pricing import PriceRecord

TODAY = date(2024, 6, 3)


def _record(offset: int, gram_price: str) -> PriceRecord:
    return PriceRecord(
        price_date=TODAY - timedelta(days=offset),
        price_per_troy_ounce_lkr=Decimal(gram_price) * TROY_OUNCE_TO_GRAMS,
    )


def test_market_summary_loads_configured_window() -> None:
    source = MagicMock()
    source.fetch_price_history.return_value = [
        _record(1, "20000"),
        _record(0, "20200"),
    ]
    use_case = GetMarketSummaryUseCase(
        source, history_days=45, logger=MagicMock(), today=lambda: TODAY
    )

    summary = use_case.execute()

    source.fetch_price_history.assert_called_once_with(
        start_date=TODAY - timedelta(days=45)
    )
    assert summary.latest_price_per_gram_lkr == Decimal("20200")
    assert summary.daily_change.percent_change == Decimal("1")
    assert summary.trend == "up"
    assert summary.weekly_change.percent_change is None


def test_quote_gold_converts_at_latest_price() -> None:
    source = MagicMock()
    source.fetch_latest_price.return_value = _record(0, "25000")

    quote = QuoteGoldUseCase(source).execute("5000")

    assert quote.grams == Decimal("0.2")
    assert quote.price_per_gram_lkr == Decimal("25000")


def test_quote_gold_without_price_fails() -> None:
    source = MagicMock()
    source.fetch_latest_price.return_value = None

    with pytest.raises(PriceUnavailableError):
        QuoteGoldUseCase(source).execute("5000")


def test_record_daily_price_appends_scraped_price() -> None:
    source = MagicMock()
    source.append_price.return_value = True
    scraper = MagicMock()
    scraper.fetch_price_per_troy_ounce.return_value = Decimal("700000")
    use_case = RecordDailyPriceUseCase(
        source, scraper=scraper, logger=MagicMock(), today=lambda: TODAY
    )

    assert use_case.execute() is True
    source.append_price.assert_called_once_with(
        PriceRecord(
            price_date=TODAY,
            price_per_troy_ounce_lkr=Decimal("700000"),
        )
    )


def test_record_daily_price_is_idempotent_per_date() -> None:
    source = MagicMock()
    source.append_price.return_value = False
    logger = MagicMock()
    use_case = RecordDailyPriceUseCase(
        source, logger=logger, today=lambda: TODAY
    )

    assert use_case.record_gram_price("20000") is False
    stored = source.append_price.call_args.args[0]
    assert stored.price_per_troy_ounce_lkr == Decimal("20000") * (
        TROY_OUNCE_TO_GRAMS
    )
    assert "already recorded" in logger.info.call_args.args[0]


def test_record_daily_price_rejects_non_positive_scrape() -> None:
    scraper = MagicMock()
    scraper.fetch_price_per_troy_ounce.return_value = Decimal("0")
    use_case = RecordDailyPriceUseCase(
        MagicMock(), scraper=scraper, logger=MagicMock()
    )

    with pytest.raises(ValidationError):
        use_case.execute()


def test_record_daily_price_requires_scraper() -> None:
    use_case = RecordDailyPriceUseCase(MagicMock(), logger=MagicMock())

    with pytest.raises(RuntimeError):
        use_case.execute()


def test_import_counts_inserted_skipped_and_rejected() -> None:
    source = MagicMock()
    source.append_price.side_effect = [True, False]
    bad = PriceRecord(price_date=TODAY, price_per_troy_ounce_lkr=Decimal("0"))
    use_case = ImportPriceHistoryUseCase(source, logger=MagicMock())

    summary = use_case.execute([_record(1, "20000"), bad, _record(2, "19000")])

    assert (summary.inserted, summary.skipped, summary.rejected) == (1, 1, 1)
    assert summary.total == 3
    dates = [call.args[0].price_date for call in source.append_price.call_args_list]
    assert dates == sorted(dates)
