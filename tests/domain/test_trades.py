"""Tests for trade fees and quotes."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.errors import (
    BelowMinimumError,
    PriceUnavailableError,
    ValidationError,
)
from src.domain.models.quotes import FeeSchedule
from src.domain.services.trades import (
    estimate_delivery_date,
    fee_schedule_from_settings,
    quote_purchase,
    quote_redemption,
    quote_sale,
)

FEES = FeeSchedule()


def test_default_fee_schedule() -> None:
    assert FEES.buy_fee_rate == Decimal("0.01")
    assert FEES.sell_fee_rate == Decimal("0.005")
    assert FEES.redemption_delivery_lkr == Decimal("2000")


def test_settings_override_only_numeric_values() -> None:
    fees = fee_schedule_from_settings(
        {
            "BUY_FEE_PERCENT": Decimal("0.02"),
            "SELL_FEE_PERCENT": None,
            "REDEMPTION_DELIVERY_LKR": "free",
        }
    )

    assert fees.buy_fee_rate == Decimal("0.02")
    assert fees.sell_fee_rate == FEES.sell_fee_rate
    assert fees.redemption_delivery_lkr == FEES.redemption_delivery_lkr


def test_purchase_charges_fee_on_top() -> None:
    quote = quote_purchase(Decimal("10000"), Decimal("20000"), FEES)

    assert quote.grams == Decimal("0.5")
    assert quote.fee_lkr == Decimal("100")
    assert quote.total_cost_lkr == Decimal("10100")


def test_purchase_below_minimum_is_rejected() -> None:
    with pytest.raises(BelowMinimumError):
        quote_purchase(Decimal("99"), Decimal("20000"), FEES)


def test_purchase_without_price_is_rejected() -> None:
    with pytest.raises(PriceUnavailableError):
        quote_purchase(Decimal("1000"), None, FEES)


def test_sale_deducts_fee_from_proceeds() -> None:
    quote = quote_sale(Decimal("2"), Decimal("20000"), FEES)

    assert quote.gross_lkr == Decimal("40000")
    assert quote.fee_lkr == Decimal("200")
    assert quote.net_lkr == Decimal("39800")


def test_sale_below_minimum_grams_is_rejected() -> None:
    with pytest.raises(BelowMinimumError):
        quote_sale(Decimal("0.0009"), Decimal("20000"), FEES)


@pytest.mark.parametrize(
    ("today", "expected"),
    [
        (date(2024, 6, 3), date(2024, 6, 6)),   # lands on Thursday
        (date(2024, 6, 5), date(2024, 6, 10)),  # lands on Saturday
        (date(2024, 6, 6), date(2024, 6, 10)),  # lands on Sunday
    ],
)
def test_delivery_date_skips_weekends(today, expected) -> None:
    assert estimate_delivery_date(today) == expected


def test_redemption_quote_charges_one_delivery_fee() -> None:
    quote = quote_redemption("5G", 3, FEES, today=date(2024, 6, 3))

    assert quote.item_size == "5g"
    assert quote.gold_required_grams == Decimal("15")
    assert quote.delivery_fee_lkr == Decimal("2000")
    assert quote.item_description == "5g Coin x 3"
    assert quote.estimated_delivery_date == date(2024, 6, 6)


@pytest.mark.parametrize(
    ("item_size", "quantity"),
    [
        ("2g", 1),
        (None, 1),
        ("1g", 0),
        ("1g", -2),
        ("1g", True),
        ("1g", "abc"),
        ("1g", "2.5"),
        ("1g", None),
    ],
)
def test_redemption_rejects_invalid_requests(item_size, quantity) -> None:
    with pytest.raises(ValidationError):
        quote_redemption(item_size, quantity, FEES)


def test_redemption_accepts_numeric_quantity_strings() -> None:
    quote = quote_redemption("10g", "2", FEES)

    assert quote.quantity == 2
    assert quote.gold_required_grams == Decimal("20")
