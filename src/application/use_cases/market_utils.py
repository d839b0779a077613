"""Shared helpers for price and fee lookups in application use cases."""

from datetime import datetime, timezone
from decimal import Decimal

from src.application.ports.price_source import PriceSourcePort
from src.application.ports.settings_store import SettingsStorePort
from src.domain.errors import PriceUnavailableError
from src.domain.models.quotes import FeeSchedule
from src.domain.services.trades import (
    FEE_SETTING_KEYS,
    fee_schedule_from_settings,
)


def utc_now() -> datetime:
    """Return the current UTC instant."""
    return datetime.now(timezone.utc)


def fetch_latest_gram_price(price_source: PriceSourcePort) -> Decimal:
    """Return the latest LKR price per gram.

    Args:
        price_source: Port providing the price history.

    Returns:
        Decimal: Latest gram price.

    Raises:
        PriceUnavailableError: No record, or a non-positive price.
    """
    record = price_source.fetch_latest_price()
    if record is None or record.price_per_troy_ounce_lkr <= 0:
        raise PriceUnavailableError("No current gold price available")
    return record.price_per_gram_lkr


def load_fee_schedule(settings_store: SettingsStorePort | None) -> FeeSchedule:
    """Return the fee schedule with stored overrides applied."""
    if settings_store is None:
        return FeeSchedule()
    return fee_schedule_from_settings(
        settings_store.fetch_settings(FEE_SETTING_KEYS)
    )


__all__ = ["utc_now", "fetch_latest_gram_price", "load_fee_schedule"]
