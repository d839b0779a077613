"""Use case to store the daily gold price."""

from datetime import date
from decimal import Decimal
from typing import Callable

from src.application.ports.price_source import PriceScraperPort, PriceSourcePort
from src.domain.models.pricing import PriceRecord
from src.domain.services.conversion import gram_to_ounce_price
from src.domain.services.validation import parse_amount, require_positive
from src.infrastructure.logging.logger import get_app_logger


class RecordDailyPriceUseCase:
    """Append one price record per day, from the scraper or manual input."""

    def __init__(
        self,
        price_source: PriceSourcePort,
        scraper: PriceScraperPort | None = None,
        logger=None,
        today: Callable[[], date] | None = None,
    ) -> None:
        self._price_source = price_source
        self._scraper = scraper
        self._logger = logger or get_app_logger()
        self._today = today or date.today

    def execute(self, price_date: date | None = None) -> bool:
        """Scrape today's ounce price and store it.

        Returns:
            bool: True when a new row was written, False when the date was
            already recorded.

        Raises:
            RuntimeError: When no scraper is configured.
            ValidationError: When the scraped price is not positive.
        """
        if self._scraper is None:
            raise RuntimeError("No price scraper configured")
        ounce_price = parse_amount(
            self._scraper.fetch_price_per_troy_ounce(), "scraped price"
        )
        return self._store(price_date or self._today(), ounce_price)

    def record_gram_price(
        self,
        price_per_gram,
        price_date: date | None = None,
    ) -> bool:
        """Store a manually entered gram price as an ounce price."""
        gram_price = parse_amount(price_per_gram, "gram price")
        require_positive(gram_price, "gram price")
        return self._store(
            price_date or self._today(), gram_to_ounce_price(gram_price)
        )

    def _store(self, price_date: date, ounce_price: Decimal) -> bool:
        require_positive(ounce_price, "price per troy ounce")
        written = self._price_source.append_price(
            PriceRecord(
                price_date=price_date,
                price_per_troy_ounce_lkr=ounce_price,
            )
        )
        if written:
            self._logger.info(
                f"Recorded gold price for {price_date}: {ounce_price} LKR/oz"
            )
        else:
            self._logger.info(f"Gold price for {price_date} already recorded")
        return written


__all__ = ["RecordDailyPriceUseCase"]
