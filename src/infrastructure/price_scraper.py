"""Price scraper adapters.

The real scraper runs as an external job; this adapter feeds a known price
through the same port, e.g. from the command line.
"""

from decimal import Decimal

from src.application.ports.price_source import PriceScraperPort


class FixedPriceScraper(PriceScraperPort):
    """Scraper returning a price supplied by the operator."""

    def __init__(self, price_per_troy_ounce: Decimal) -> None:
        self._price = price_per_troy_ounce

    def fetch_price_per_troy_ounce(self) -> Decimal:
        return self._price


__all__ = ["FixedPriceScraper"]
