"""Use cases for user price alerts and market movement notices."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Callable

from src.application.ports.schedule_store import (
    NotificationStorePort,
    PriceAlertStorePort,
)
from src.application.use_cases.get_market_summary import (
    GetMarketSummaryUseCase,
)
from src.application.use_cases.market_utils import utc_now
from src.domain.constants import (
    MARKET_ALERT_COOLDOWN_HOURS,
    MARKET_MOVEMENT_THRESHOLD_PERCENT,
    MAX_PRICE_ALERTS_PER_USER,
)
from src.domain.errors import PriceUnavailableError, ValidationError
from src.domain.models.schedules import (
    Notification,
    NotificationKind,
    PriceAlert,
)
from src.domain.services.schedules import (
    build_price_alert,
    is_alert_triggered,
    is_cooldown_elapsed,
    is_significant_movement,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import round_lkr


class CreatePriceAlertUseCase:
    """Validate and store a price alert, capped per user."""

    def __init__(
        self,
        alert_store: PriceAlertStorePort,
        logger=None,
        max_alerts: int = MAX_PRICE_ALERTS_PER_USER,
    ) -> None:
        self._alert_store = alert_store
        self._logger = logger or get_app_logger()
        self._max_alerts = max_alerts

    def execute(
        self,
        user_id: str,
        target_price_per_gram_lkr,
        condition,
    ) -> PriceAlert:
        """Store the alert and return it with its id.

        Raises:
            ValidationError: Invalid terms, or the user already has the
                maximum number of active alerts.
        """
        alert = build_price_alert(
            user_id, target_price_per_gram_lkr, condition
        )
        active = [
            existing
            for existing in self._alert_store.list_alerts(user_id)
            if existing.is_active
        ]
        if len(active) >= self._max_alerts:
            raise ValidationError(
                f"Price alert limit of {self._max_alerts} reached"
            )
        saved = self._alert_store.save_alert(alert)
        self._logger.info(
            f"Price alert created: user={user_id}, id={saved.alert_id}, "
            f"{saved.condition.value} {saved.target_price_per_gram_lkr}"
        )
        return saved


@dataclass(frozen=True)
class AlertCheckResult:
    """Outcome of one alert check.

    ``market_change_percent`` is the daily change, None when history is too
    short to compute it.
    """

    price_per_gram_lkr: Decimal
    triggered: list[PriceAlert]
    market_change_percent: Decimal | None
    market_alert_sent: bool


class CheckPriceAlertsUseCase:
    """Fire triggered price alerts and broadcast large daily moves."""

    def __init__(
        self,
        market_summary: GetMarketSummaryUseCase,
        alert_store: PriceAlertStorePort,
        notifications: NotificationStorePort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
        threshold_percent: Decimal = MARKET_MOVEMENT_THRESHOLD_PERCENT,
        cooldown: timedelta = timedelta(hours=MARKET_ALERT_COOLDOWN_HOURS),
    ) -> None:
        self._market_summary = market_summary
        self._alert_store = alert_store
        self._notifications = notifications
        self._logger = logger or get_app_logger()
        self._clock = clock or utc_now
        self._threshold_percent = threshold_percent
        self._cooldown = cooldown

    def execute(self) -> AlertCheckResult:
        """Check every active alert against the latest gram price.

        Raises:
            PriceUnavailableError: No price history to check against.
        """
        summary = self._market_summary.execute()
        price = summary.latest_price_per_gram_lkr
        if price <= 0:
            raise PriceUnavailableError("No current gold price available")

        change = summary.daily_change
        market_alert_sent = False
        if is_significant_movement(change, self._threshold_percent):
            market_alert_sent = self._broadcast_movement(
                change.percent_change, price
            )

        triggered = []
        for alert in self._alert_store.list_active_alerts():
            if not is_alert_triggered(alert, price):
                continue
            target = round_lkr(alert.target_price_per_gram_lkr)
            self._notifications.add_notification(
                Notification(
                    user_id=alert.user_id,
                    kind=NotificationKind.PRICE_ALERT,
                    title=(
                        f"Price Alert Triggered! "
                        f"({alert.condition.value} {target} LKR/g)"
                    ),
                    message=(
                        f"Gold price is now {round_lkr(price)} LKR/g, which "
                        f"triggered your alert set for "
                        f"{alert.condition.value} {target} LKR/g."
                    ),
                    created_at=self._clock(),
                )
            )
            # Alerts fire once.
            self._alert_store.deactivate_alert(alert.alert_id)
            triggered.append(alert)

        self._logger.info(
            f"Price alert check at {price}: {len(triggered)} triggered, "
            f"market alert sent={market_alert_sent}"
        )
        return AlertCheckResult(
            price_per_gram_lkr=price,
            triggered=triggered,
            market_change_percent=change.percent_change,
            market_alert_sent=market_alert_sent,
        )

    def _broadcast_movement(self, percent: Decimal, price: Decimal) -> bool:
        now = self._clock()
        last_sent = self._notifications.fetch_last_sent_at(
            NotificationKind.MARKET_MOVEMENT
        )
        if not is_cooldown_elapsed(last_sent, now, self._cooldown):
            self._logger.info(
                f"Market movement of {percent}% within cooldown, not sent"
            )
            return False
        shown = abs(percent).quantize(Decimal("0.1"))
        self._notifications.add_notification(
            Notification(
                user_id=None,
                kind=NotificationKind.MARKET_MOVEMENT,
                title=f"Gold Market Alert: {shown}% Change",
                message=(
                    f"The gold price has changed by approximately {shown}% "
                    f"since the previous day. Current price: "
                    f"{round_lkr(price)} LKR/g."
                ),
                created_at=now,
            )
        )
        self._logger.info(f"Market movement alert sent: {percent}%")
        return True


__all__ = [
    "AlertCheckResult",
    "CheckPriceAlertsUseCase",
    "CreatePriceAlertUseCase",
]
