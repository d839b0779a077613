"""Gold unit and currency conversions.

Every ounce/gram conversion in the code base goes through this module so the
troy ounce constant is applied consistently.
"""

from decimal import Decimal

from src.domain.constants import TROY_OUNCE_TO_GRAMS
from src.domain.errors import PriceUnavailableError


def ounce_to_gram_price(price_per_troy_ounce: Decimal) -> Decimal:
    """Return the price per gram for a price per troy ounce."""
    return price_per_troy_ounce / TROY_OUNCE_TO_GRAMS


def gram_to_ounce_price(price_per_gram: Decimal) -> Decimal:
    """Return the price per troy ounce for a price per gram."""
    return price_per_gram * TROY_OUNCE_TO_GRAMS


def _require_price(price_per_gram: Decimal | None) -> Decimal:
    if price_per_gram is None or price_per_gram <= 0:
        raise PriceUnavailableError(
            f"Cannot quote with gold price {price_per_gram}"
        )
    return price_per_gram


def lkr_to_grams(amount_lkr: Decimal, price_per_gram: Decimal | None) -> Decimal:
    """Convert an LKR amount to grams of gold.

    Args:
        amount_lkr: Amount in LKR.
        price_per_gram: Latest LKR price per gram.

    Returns:
        Decimal: Equivalent grams of gold.

    Raises:
        PriceUnavailableError: If the price is missing, zero or negative.
    """
    return amount_lkr / _require_price(price_per_gram)


def grams_to_lkr(grams: Decimal, price_per_gram: Decimal | None) -> Decimal:
    """Convert grams of gold to their LKR value."""
    return grams * _require_price(price_per_gram)


__all__ = [
    "ounce_to_gram_price",
    "gram_to_ounce_price",
    "lkr_to_grams",
    "grams_to_lkr",
]
