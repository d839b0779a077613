"""Domain models for promo codes and their bonus rules."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class PromoType(str, Enum):
    """Purpose a promo code can be redeemed for."""

    DEPOSIT_BONUS = "DEPOSIT_BONUS"
    PURCHASE_BONUS = "PURCHASE_BONUS"


@dataclass(frozen=True)
class PercentageDepositBonus:
    """Bonus worth ``value`` percentage points of the deposit."""

    value: Decimal

    bonus_type = "PERCENTAGE_DEPOSIT"

    def bonus_for(self, amount_lkr: Decimal) -> Decimal:
        return amount_lkr * (self.value / Decimal("100"))


@dataclass(frozen=True)
class FlatLkrDepositBonus:
    """Flat LKR bonus, independent of the deposit size."""

    value: Decimal

    bonus_type = "FLAT_LKR_DEPOSIT"

    def bonus_for(self, amount_lkr: Decimal) -> Decimal:
        return self.value


BonusRule = PercentageDepositBonus | FlatLkrDepositBonus

BONUS_RULE_TYPES: dict[str, type] = {
    PercentageDepositBonus.bonus_type: PercentageDepositBonus,
    FlatLkrDepositBonus.bonus_type: FlatLkrDepositBonus,
}


@dataclass(frozen=True)
class PromoCode:
    """Stored promo code.

    Attributes:
        code: Uppercase identifier without whitespace.
        promo_type: Purpose the code applies to.
        bonus_rule: Bonus computation rule.
        expires_at: Code is valid strictly before this instant.
        description: Human readable summary.
        is_active: Admin switch; inactive codes are never applied.
        total_usage_limit: Maximum redemptions, None for unlimited.
        times_used: Redemptions so far.
    """

    code: str
    promo_type: PromoType
    bonus_rule: BonusRule
    expires_at: datetime
    description: str = ""
    is_active: bool = True
    total_usage_limit: int | None = None
    times_used: int = 0


@dataclass(frozen=True)
class PromoDetails:
    """Validated promo terms returned to callers."""

    code: str
    description: str
    bonus_rule: BonusRule

    @property
    def bonus_type(self) -> str:
        return self.bonus_rule.bonus_type

    @property
    def bonus_value(self) -> Decimal:
        return self.bonus_rule.value


__all__ = [
    "PromoType",
    "PercentageDepositBonus",
    "FlatLkrDepositBonus",
    "BonusRule",
    "BONUS_RULE_TYPES",
    "PromoCode",
    "PromoDetails",
]
