"""Rules for recurring investments, price alerts and market movement."""

from datetime import date, datetime, timedelta
from decimal import Decimal

from src.domain.constants import (
    AUTO_INVEST_WEEKLY_WEEKDAY,
    MARKET_ALERT_COOLDOWN_HOURS,
    MARKET_MOVEMENT_THRESHOLD_PERCENT,
    MAX_AUTO_INVEST_DAY_OF_MONTH,
    MINIMUM_INVESTMENT_LKR,
)
from src.domain.errors import ValidationError
from src.domain.models.pricing import PriceChange
from src.domain.models.schedules import (
    AlertCondition,
    AutoInvestFrequency,
    AutoInvestPlan,
    PriceAlert,
)
from src.domain.services.validation import (
    parse_amount,
    require_minimum,
    require_positive,
)


def build_auto_invest_plan(
    user_id: str,
    frequency,
    amount_lkr,
    day_of_month=None,
) -> AutoInvestPlan:
    """Validate raw plan terms and return an unsaved plan.

    Args:
        user_id: Wallet owner.
        frequency: ``daily``, ``weekly`` or ``monthly`` (or the enum).
        amount_lkr: Amount invested per run.
        day_of_month: Required for monthly plans, ignored otherwise.

    Raises:
        ValidationError: Unknown frequency, or a monthly plan without a
            run day in 1..28.
        BelowMinimumError: Amount below the investment minimum.
    """
    resolved = _parse_choice(AutoInvestFrequency, frequency, "plan frequency")
    amount = parse_amount(amount_lkr, "plan amount")
    require_minimum(amount, MINIMUM_INVESTMENT_LKR)
    run_day = None
    if resolved is AutoInvestFrequency.MONTHLY:
        run_day = _parse_day_of_month(day_of_month)
    return AutoInvestPlan(
        plan_id=None,
        user_id=user_id,
        frequency=resolved,
        amount_lkr=amount,
        day_of_month=run_day,
    )


def _parse_choice(enum_type, value, field_name: str):
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(str(value).strip().lower())
    except ValueError as exc:
        raise ValidationError(f"Invalid {field_name}: {value!r}") from exc


def _parse_day_of_month(value) -> int:
    parsed = parse_amount(value, "day of month")
    if (
        parsed != parsed.to_integral_value()
        or not 1 <= parsed <= MAX_AUTO_INVEST_DAY_OF_MONTH
    ):
        raise ValidationError(
            f"Day of month must be a whole number from 1 to "
            f"{MAX_AUTO_INVEST_DAY_OF_MONTH}: {value}"
        )
    return int(parsed)


def is_plan_due(plan: AutoInvestPlan, today: date) -> bool:
    """Return True when an active plan should run on ``today``.

    Daily plans run every day, weekly plans on Mondays and monthly plans
    on their configured day.
    """
    if not plan.is_active:
        return False
    if plan.frequency is AutoInvestFrequency.DAILY:
        return True
    if plan.frequency is AutoInvestFrequency.WEEKLY:
        return today.weekday() == AUTO_INVEST_WEEKLY_WEEKDAY
    return plan.day_of_month == today.day


def build_price_alert(
    user_id: str,
    target_price_per_gram_lkr,
    condition,
) -> PriceAlert:
    """Validate raw alert terms and return an unsaved alert.

    Raises:
        ValidationError: Unknown condition or a non-positive target.
    """
    resolved = _parse_choice(AlertCondition, condition, "alert condition")
    target = parse_amount(target_price_per_gram_lkr, "target price")
    require_positive(target, "target price")
    return PriceAlert(
        alert_id=None,
        user_id=user_id,
        target_price_per_gram_lkr=target,
        condition=resolved,
    )


def is_alert_triggered(alert: PriceAlert, price_per_gram_lkr: Decimal) -> bool:
    """Return True when the gram price has reached the alert target.

    Both conditions are inclusive of the target itself.
    """
    if not alert.is_active:
        return False
    if alert.condition is AlertCondition.BELOW:
        return price_per_gram_lkr <= alert.target_price_per_gram_lkr
    return price_per_gram_lkr >= alert.target_price_per_gram_lkr


def is_significant_movement(
    change: PriceChange,
    threshold_percent: Decimal = MARKET_MOVEMENT_THRESHOLD_PERCENT,
) -> bool:
    """Return True when a price change reaches the movement threshold."""
    if not change.is_available:
        return False
    return abs(change.percent_change) >= threshold_percent


def is_cooldown_elapsed(
    last_sent_at: datetime | None,
    now: datetime,
    cooldown: timedelta = timedelta(hours=MARKET_ALERT_COOLDOWN_HOURS),
) -> bool:
    if last_sent_at is None:
        return True
    return now - last_sent_at > cooldown


__all__ = [
    "build_auto_invest_plan",
    "is_plan_due",
    "build_price_alert",
    "is_alert_triggered",
    "is_significant_movement",
    "is_cooldown_elapsed",
]
