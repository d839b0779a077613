"""Ports for auto-investment plans, price alerts and notifications."""

from datetime import datetime
from typing import Protocol

from src.domain.models.schedules import (
    AutoInvestPlan,
    Notification,
    NotificationKind,
    PriceAlert,
)


class AutoInvestPlanStorePort(Protocol):
    """Port for stored recurring investment plans."""

    def list_active_plans(self) -> list[AutoInvestPlan]:
        """Return every active plan across users."""

    def save_plan(self, plan: AutoInvestPlan) -> AutoInvestPlan:
        """Insert a plan and return it with its assigned id."""

    def set_plan_active(self, plan_id: int, is_active: bool) -> bool:
        """Pause or resume a plan; return False if it does not exist."""


class PriceAlertStorePort(Protocol):
    """Port for stored user price alerts."""

    def list_active_alerts(self) -> list[PriceAlert]:
        """Return every active alert across users."""

    def list_alerts(self, user_id: str) -> list[PriceAlert]:
        """Return the user's alerts, active or fired."""

    def save_alert(self, alert: PriceAlert) -> PriceAlert:
        """Insert an alert and return it with its assigned id."""

    def deactivate_alert(self, alert_id: int) -> bool:
        """Mark an alert as fired; return False if it does not exist."""


class NotificationStorePort(Protocol):
    """Port for the user notification queue."""

    def add_notification(self, notification: Notification) -> None:
        """Queue a notification."""

    def fetch_last_sent_at(self, kind: NotificationKind) -> datetime | None:
        """Return when the newest notification of ``kind`` was queued."""


__all__ = [
    "AutoInvestPlanStorePort",
    "PriceAlertStorePort",
    "NotificationStorePort",
]
