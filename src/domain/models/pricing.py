"""Domain models for gold price history."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.domain.constants import TROY_OUNCE_TO_GRAMS


@dataclass(frozen=True)
class PriceRecord:
    """Daily gold price as scraped, quoted per troy ounce.

    Attributes:
        price_date: Calendar date the price applies to (unique).
        price_per_troy_ounce_lkr: Source-of-truth price in LKR per ounce.
    """

    price_date: date
    price_per_troy_ounce_lkr: Decimal

    @property
    def price_per_gram_lkr(self) -> Decimal:
        """Return the derived LKR price per gram."""
        return self.price_per_troy_ounce_lkr / TROY_OUNCE_TO_GRAMS


@dataclass(frozen=True)
class PriceChange:
    """Percent change over a look-back window.

    ``percent_change`` is None when history is too short for the window.
    """

    window_days: int
    percent_change: Decimal | None
    reference_date: date | None = None

    @property
    def is_available(self) -> bool:
        return self.percent_change is not None


@dataclass(frozen=True)
class MarketSummary:
    """Latest price with look-back changes, trend and a naive forecast."""

    latest_date: date | None
    latest_price_per_gram_lkr: Decimal
    latest_price_per_troy_ounce_lkr: Decimal
    daily_change: PriceChange
    weekly_change: PriceChange
    monthly_change: PriceChange
    trend: str
    recent_history: list[PriceRecord]
    predicted_price_per_gram_lkr: Decimal | None = None
    predicted_change_percent: Decimal | None = None


__all__ = ["PriceRecord", "PriceChange", "MarketSummary"]
