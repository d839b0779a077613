"""Domain models for recurring investments, price alerts and notifications."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class AutoInvestFrequency(str, Enum):
    """How often an auto-investment plan buys gold."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


@dataclass(frozen=True)
class AutoInvestPlan:
    """Recurring gold purchase funded from the wallet.

    Attributes:
        plan_id: Store identifier, None before the plan is saved.
        user_id: Wallet owner.
        frequency: Run frequency.
        amount_lkr: Amount invested per run; the buy fee is charged on top.
        day_of_month: Run day (1-28) for monthly plans, None otherwise.
        is_active: Paused plans are never run.
    """

    plan_id: int | None
    user_id: str
    frequency: AutoInvestFrequency
    amount_lkr: Decimal
    day_of_month: int | None = None
    is_active: bool = True


class AlertCondition(str, Enum):
    BELOW = "below"
    ABOVE = "above"


@dataclass(frozen=True)
class PriceAlert:
    """User-defined threshold on the gram price.

    The alert fires once and is then deactivated.
    """

    alert_id: int | None
    user_id: str
    target_price_per_gram_lkr: Decimal
    condition: AlertCondition
    is_active: bool = True


class NotificationKind(str, Enum):
    PRICE_ALERT = "price_alert"
    MARKET_MOVEMENT = "market_movement"
    AUTOPAY_SUCCESS = "autopay_success"
    AUTOPAY_FAILED = "autopay_failed"


@dataclass(frozen=True)
class Notification:
    """Message queued for a user.

    Attributes:
        user_id: Recipient, None for a broadcast to every subscriber.
        kind: Notification category.
        title: Short headline.
        message: Body text.
        created_at: Aware UTC creation instant.
    """

    user_id: str | None
    kind: NotificationKind
    title: str
    message: str
    created_at: datetime


__all__ = [
    "AutoInvestFrequency",
    "AutoInvestPlan",
    "AlertCondition",
    "PriceAlert",
    "NotificationKind",
    "Notification",
]
