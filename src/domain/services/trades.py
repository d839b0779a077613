"""Fee schedule and quotes for buying, selling and redeeming gold."""

from collections.abc import Mapping
from datetime import date, timedelta
from decimal import Decimal

from src.domain.constants import (
    DELIVERY_LEAD_DAYS,
    MINIMUM_INVESTMENT_LKR,
    MINIMUM_SELL_GRAMS,
    REDEMPTION_ITEM_GRAMS,
)
from src.domain.errors import ValidationError
from src.domain.models.quotes import (
    FeeSchedule,
    PurchaseQuote,
    RedemptionQuote,
    SaleQuote,
)
from src.domain.services.conversion import grams_to_lkr, lkr_to_grams
from src.domain.services.normalization import normalize_item_size
from src.domain.services.validation import parse_amount, require_minimum

BUY_FEE_SETTING = "BUY_FEE_PERCENT"
SELL_FEE_SETTING = "SELL_FEE_PERCENT"
REDEMPTION_FEE_SETTING = "REDEMPTION_DELIVERY_LKR"
FEE_SETTING_KEYS = (BUY_FEE_SETTING, SELL_FEE_SETTING, REDEMPTION_FEE_SETTING)


def fee_schedule_from_settings(
    settings: Mapping[str, Decimal | None],
) -> FeeSchedule:
    """Overlay stored fee settings on the default schedule.

    Only numeric values override a default; missing keys keep it.
    """
    defaults = FeeSchedule()

    def _pick(key: str, fallback: Decimal) -> Decimal:
        value = settings.get(key)
        return value if isinstance(value, Decimal) else fallback

    return FeeSchedule(
        buy_fee_rate=_pick(BUY_FEE_SETTING, defaults.buy_fee_rate),
        sell_fee_rate=_pick(SELL_FEE_SETTING, defaults.sell_fee_rate),
        redemption_delivery_lkr=_pick(
            REDEMPTION_FEE_SETTING, defaults.redemption_delivery_lkr
        ),
    )


def quote_purchase(
    amount_lkr: Decimal,
    price_per_gram: Decimal | None,
    fees: FeeSchedule,
) -> PurchaseQuote:
    """Quote a gold purchase; the fee is charged on top of the amount.

    Raises:
        BelowMinimumError: Amount below the investment minimum.
        PriceUnavailableError: No usable price.
    """
    require_minimum(amount_lkr, MINIMUM_INVESTMENT_LKR)
    grams = lkr_to_grams(amount_lkr, price_per_gram)
    return PurchaseQuote(
        amount_lkr=amount_lkr,
        fee_lkr=amount_lkr * fees.buy_fee_rate,
        grams=grams,
        price_per_gram_lkr=price_per_gram,
    )


def quote_sale(
    grams: Decimal,
    price_per_gram: Decimal | None,
    fees: FeeSchedule,
) -> SaleQuote:
    """Quote a gold sale; the fee is deducted from the gross proceeds."""
    require_minimum(grams, MINIMUM_SELL_GRAMS)
    gross = grams_to_lkr(grams, price_per_gram)
    return SaleQuote(
        grams=grams,
        gross_lkr=gross,
        fee_lkr=gross * fees.sell_fee_rate,
        price_per_gram_lkr=price_per_gram,
    )


def estimate_delivery_date(
    today: date,
    lead_days: int = DELIVERY_LEAD_DAYS,
) -> date:
    """Return the estimated delivery date, moving weekends to Monday."""
    estimated = today + timedelta(days=lead_days)
    weekday = estimated.weekday()
    if weekday == 5:
        estimated += timedelta(days=2)
    elif weekday == 6:
        estimated += timedelta(days=1)
    return estimated


def _parse_quantity(quantity) -> int:
    parsed = parse_amount(quantity, "quantity")
    if parsed != parsed.to_integral_value() or parsed <= 0:
        raise ValidationError(
            f"Quantity must be a positive whole number: {quantity}"
        )
    return int(parsed)


def quote_redemption(
    item_size: str,
    quantity: int,
    fees: FeeSchedule,
    today: date | None = None,
) -> RedemptionQuote:
    """Quote a physical coin redemption.

    The delivery fee is charged once per request.

    Args:
        item_size: Coin size such as ``5g``.
        quantity: Number of coins, at least one.
        fees: Fee schedule providing the delivery fee.
        today: Request date used for the delivery estimate.

    Raises:
        ValidationError: Unknown size, or a quantity that is not a positive
            whole number.
    """
    size = normalize_item_size(item_size)
    if size not in REDEMPTION_ITEM_GRAMS:
        raise ValidationError(f"Unsupported item size: {item_size}")
    count = _parse_quantity(quantity)
    return RedemptionQuote(
        item_size=size,
        quantity=count,
        gold_required_grams=REDEMPTION_ITEM_GRAMS[size] * count,
        delivery_fee_lkr=fees.redemption_delivery_lkr,
        item_description=f"{size} Coin x {count}",
        estimated_delivery_date=(
            estimate_delivery_date(today) if today else None
        ),
    )


__all__ = [
    "BUY_FEE_SETTING",
    "SELL_FEE_SETTING",
    "REDEMPTION_FEE_SETTING",
    "FEE_SETTING_KEYS",
    "fee_schedule_from_settings",
    "quote_purchase",
    "quote_sale",
    "estimate_delivery_date",
    "quote_redemption",
]
