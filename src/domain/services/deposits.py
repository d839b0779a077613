"""Deposit bonus and wallet credit computation."""

from decimal import Decimal

from src.domain.constants import MAXIMUM_DEPOSIT_LKR, MINIMUM_DEPOSIT_LKR
from src.domain.errors import ValidationError
from src.domain.models.promos import (
    FlatLkrDepositBonus,
    PercentageDepositBonus,
    PromoDetails,
)
from src.domain.models.quotes import DepositQuote
from src.domain.services.validation import require_minimum


def compute_bonus(
    amount_lkr: Decimal,
    promo_details: PromoDetails | None,
) -> Decimal:
    """Return the bonus credited on top of a deposit.

    Args:
        amount_lkr: Deposit amount.
        promo_details: Validated promo terms, or None.

    Returns:
        Decimal: Bonus in LKR; zero without a promo.
    """
    if promo_details is None:
        return Decimal("0")
    rule = promo_details.bonus_rule
    if isinstance(rule, (PercentageDepositBonus, FlatLkrDepositBonus)):
        return rule.bonus_for(amount_lkr)
    raise TypeError(f"Unhandled bonus rule: {rule!r}")


def quote_deposit(
    amount_lkr: Decimal,
    promo_details: PromoDetails | None = None,
    *,
    minimum_lkr: Decimal = MINIMUM_DEPOSIT_LKR,
    maximum_lkr: Decimal | None = MAXIMUM_DEPOSIT_LKR,
) -> DepositQuote:
    """Compute the wallet credit for a deposit.

    The minimum is enforced before any promo logic runs.

    Raises:
        BelowMinimumError: If ``amount_lkr`` is below ``minimum_lkr``.
        ValidationError: If ``amount_lkr`` exceeds ``maximum_lkr``.
    """
    require_minimum(amount_lkr, minimum_lkr)
    if maximum_lkr is not None and amount_lkr > maximum_lkr:
        raise ValidationError(
            f"Deposit amount {amount_lkr} exceeds the maximum of {maximum_lkr}"
        )
    bonus = compute_bonus(amount_lkr, promo_details)
    return DepositQuote(
        amount_lkr=amount_lkr,
        bonus_lkr=bonus,
        promo_code=promo_details.code if promo_details else None,
    )


__all__ = ["compute_bonus", "quote_deposit"]
