"""Tests for deposit bonus computation."""

from decimal import Decimal

import pytest

from src.domain.errors import BelowMinimumError, ValidationError
from src.domain.models.promos import (
    FlatLkrDepositBonus,
    PercentageDepositBonus,
    PromoDetails,
)
from src.domain.services.deposits import compute_bonus, quote_deposit


def _details(rule) -> PromoDetails:
    return PromoDetails(code="WELCOME", description="", bonus_rule=rule)


def test_percentage_bonus_uses_percentage_points() -> None:
    details = _details(PercentageDepositBonus(Decimal("10")))

    assert compute_bonus(Decimal("5000"), details) == Decimal("500")


def test_flat_bonus_ignores_deposit_size() -> None:
    details = _details(FlatLkrDepositBonus(Decimal("250")))

    assert compute_bonus(Decimal("100"), details) == Decimal("250")
    assert compute_bonus(Decimal("90000"), details) == Decimal("250")


def test_no_promo_means_no_bonus() -> None:
    assert compute_bonus(Decimal("1000"), None) == Decimal("0")


def test_unknown_rule_is_rejected() -> None:
    details = PromoDetails(code="X", description="", bonus_rule=object())

    with pytest.raises(TypeError):
        compute_bonus(Decimal("1000"), details)


def test_quote_deposit_credits_amount_plus_bonus() -> None:
    quote = quote_deposit(
        Decimal("2000"),
        _details(PercentageDepositBonus(Decimal("5"))),
    )

    assert quote.amount_lkr == Decimal("2000")
    assert quote.bonus_lkr == Decimal("100")
    assert quote.total_credited_lkr == Decimal("2100")
    assert quote.promo_code == "WELCOME"


def test_quote_deposit_accepts_exact_minimum() -> None:
    quote = quote_deposit(Decimal("100"))

    assert quote.total_credited_lkr == Decimal("100")
    assert quote.promo_code is None


def test_quote_deposit_rejects_below_minimum_before_promo() -> None:
    class _ExplodingRule:
        def bonus_for(self, amount):  # pragma: no cover
            raise AssertionError("promo evaluated")

    with pytest.raises(BelowMinimumError) as excinfo:
        quote_deposit(Decimal("99.99"), _details(_ExplodingRule()))

    assert excinfo.value.minimum == Decimal("100")


def test_quote_deposit_rejects_above_maximum() -> None:
    with pytest.raises(ValidationError):
        quote_deposit(Decimal("2000"), maximum_lkr=Decimal("1000"))


@pytest.mark.parametrize(
    "amount", ["100", "100.01", "999", "5000", "250000", "1000000"]
)
def test_flat_500_bonus_is_exact_for_any_valid_amount(amount) -> None:
    details = _details(FlatLkrDepositBonus(Decimal("500")))

    quote = quote_deposit(Decimal(amount), details)

    assert quote.bonus_lkr == Decimal("500")
    assert quote.total_credited_lkr == Decimal(amount) + Decimal("500")


def test_ten_percent_on_1000_credits_1100() -> None:
    details = _details(PercentageDepositBonus(Decimal("10")))

    quote = quote_deposit(Decimal("1000"), details)

    assert quote.bonus_lkr == Decimal("100")
    assert quote.total_credited_lkr == Decimal("1100")
