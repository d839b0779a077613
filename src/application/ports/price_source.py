"""Ports for reading and appending daily gold prices."""

from datetime import date
from decimal import Decimal
from typing import Protocol

from src.domain.models.pricing import PriceRecord


class PriceSourcePort(Protocol):
    """Port exposing the daily price history."""

    def fetch_latest_price(self) -> PriceRecord | None:
        """Return the most recent price record, if any."""

    def fetch_price_history(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[PriceRecord]:
        """Return price records ordered by date ascending."""

    def append_price(self, record: PriceRecord) -> bool:
        """Store a record unless its date exists; return True if written."""


class PriceScraperPort(Protocol):
    """Port for the external job that scrapes the daily gold rate."""

    def fetch_price_per_troy_ounce(self) -> Decimal:
        """Return today's LKR price per troy ounce."""


__all__ = ["PriceSourcePort", "PriceScraperPort"]
