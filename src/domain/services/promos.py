"""Promo code validity rules."""

from datetime import datetime
from decimal import Decimal

from src.domain.errors import (
    ExpiredError,
    NotFoundError,
    UsageLimitReachedError,
    ValidationError,
)
from src.domain.models.promos import (
    BONUS_RULE_TYPES,
    BonusRule,
    PromoCode,
    PromoDetails,
    PromoType,
)


def build_bonus_rule(bonus_type: str, bonus_value: Decimal) -> BonusRule:
    """Build the bonus rule variant for a stored bonus type.

    Raises:
        ValidationError: If the bonus type is unknown or the value negative.
    """
    rule_type = BONUS_RULE_TYPES.get((bonus_type or "").strip().upper())
    if rule_type is None:
        raise ValidationError(f"Unsupported bonus type: {bonus_type}")
    if bonus_value < 0:
        raise ValidationError(f"Bonus value must not be negative: {bonus_value}")
    return rule_type(bonus_value)


def is_promo_active(promo: PromoCode, now: datetime) -> bool:
    """Return True when the promo can be applied at ``now``."""
    if not promo.is_active or now >= promo.expires_at:
        return False
    if promo.total_usage_limit is None:
        return True
    return promo.times_used < promo.total_usage_limit


def validate_promo(
    code: str,
    promo: PromoCode | None,
    promo_type: PromoType,
    now: datetime,
) -> PromoDetails:
    """Check a looked-up promo code against its purpose and validity window.

    Args:
        code: Normalized code that was looked up.
        promo: Stored promo, or None when the lookup found nothing.
        promo_type: Purpose the caller wants to use the code for.
        now: Current instant; the code is expired when ``now >= expires_at``.

    Returns:
        PromoDetails: Terms the caller can use to compute the bonus.

    Raises:
        NotFoundError: Missing, inactive or issued for another purpose.
        ExpiredError: Expiry instant reached.
        UsageLimitReachedError: Total usage limit consumed.
    """
    if promo is None or not promo.is_active or promo.promo_type != promo_type:
        raise NotFoundError(code)
    if now >= promo.expires_at:
        raise ExpiredError(code)
    if (
        promo.total_usage_limit is not None
        and promo.times_used >= promo.total_usage_limit
    ):
        raise UsageLimitReachedError(code)
    return PromoDetails(
        code=promo.code,
        description=promo.description,
        bonus_rule=promo.bonus_rule,
    )


__all__ = ["build_bonus_rule", "is_promo_active", "validate_promo"]
