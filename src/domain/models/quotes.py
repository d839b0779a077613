"""Domain models for computed quotes."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.domain.constants import (
    DEFAULT_BUY_FEE_RATE,
    DEFAULT_REDEMPTION_DELIVERY_LKR,
    DEFAULT_SELL_FEE_RATE,
)


@dataclass(frozen=True)
class DepositQuote:
    """Wallet credit resulting from a deposit."""

    amount_lkr: Decimal
    bonus_lkr: Decimal
    promo_code: str | None = None

    @property
    def total_credited_lkr(self) -> Decimal:
        return self.amount_lkr + self.bonus_lkr


@dataclass(frozen=True)
class FeeSchedule:
    """Platform fees; rates are fractions (0.01 is 1%)."""

    buy_fee_rate: Decimal = DEFAULT_BUY_FEE_RATE
    sell_fee_rate: Decimal = DEFAULT_SELL_FEE_RATE
    redemption_delivery_lkr: Decimal = DEFAULT_REDEMPTION_DELIVERY_LKR


@dataclass(frozen=True)
class PurchaseQuote:
    amount_lkr: Decimal
    fee_lkr: Decimal
    grams: Decimal
    price_per_gram_lkr: Decimal

    @property
    def total_cost_lkr(self) -> Decimal:
        return self.amount_lkr + self.fee_lkr


@dataclass(frozen=True)
class SaleQuote:
    grams: Decimal
    gross_lkr: Decimal
    fee_lkr: Decimal
    price_per_gram_lkr: Decimal

    @property
    def net_lkr(self) -> Decimal:
        return self.gross_lkr - self.fee_lkr


@dataclass(frozen=True)
class RedemptionQuote:
    """Physical redemption of coins."""

    item_size: str
    quantity: int
    gold_required_grams: Decimal
    delivery_fee_lkr: Decimal
    item_description: str
    estimated_delivery_date: date | None = None


__all__ = [
    "DepositQuote",
    "FeeSchedule",
    "PurchaseQuote",
    "SaleQuote",
    "RedemptionQuote",
]
