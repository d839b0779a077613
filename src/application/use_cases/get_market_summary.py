"""Use case to summarize the gold market for the dashboard."""

from datetime import date, timedelta
from typing import Callable

from src.application.ports.price_source import PriceSourcePort
from src.domain.models.pricing import MarketSummary, PriceRecord
from src.domain.services.price_history import build_market_summary
from src.infrastructure.logging.logger import get_app_logger


class GetMarketSummaryUseCase:
    """Load recent price history and aggregate it."""

    def __init__(
        self,
        price_source: PriceSourcePort,
        history_days: int = 60,
        logger=None,
        today: Callable[[], date] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            price_source: Port providing the price history.
            history_days: Calendar days of history to load; must cover the
                longest look-back window.
            logger: Optional logger compatible with logging.Logger-like API.
            today: Optional callable returning today's date.
        """
        self._price_source = price_source
        self._history_days = history_days
        self._logger = logger or get_app_logger()
        self._today = today or date.today

    def execute(self) -> MarketSummary:
        history = self.load_history()
        summary = build_market_summary(history)
        self._logger.info(
            f"Market summary built from {len(history)} records, "
            f"trend={summary.trend}"
        )
        return summary

    def load_history(self, days: int | None = None) -> list[PriceRecord]:
        """Return the last ``days`` calendar days of prices, ascending."""
        span = self._history_days if days is None else days
        start_date = self._today() - timedelta(days=span)
        return self._price_source.fetch_price_history(start_date=start_date)


__all__ = ["GetMarketSummaryUseCase"]
