"""SQLAlchemy-backed stores for auto-invest plans, alerts and notifications."""

from datetime import datetime

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.schedule_store import (
    AutoInvestPlanStorePort,
    NotificationStorePort,
    PriceAlertStorePort,
)
from src.domain.models.schedules import (
    AlertCondition,
    AutoInvestFrequency,
    AutoInvestPlan,
    Notification,
    NotificationKind,
    PriceAlert,
)
from src.utils.decimal_utils import coerce_decimal
from src.utils.time_utils import ensure_utc

PLAN_COLUMNS = (
    "plan_id, user_id, frequency, amount_lkr, day_of_month, is_active"
)

SELECT_ACTIVE_PLANS_SQL = text(
    f"""
    SELECT {PLAN_COLUMNS}
    FROM auto_invest_plans
    WHERE is_active
    ORDER BY plan_id
    """
)

INSERT_PLAN_SQL = text(
    """
    INSERT INTO auto_invest_plans (
        user_id,
        frequency,
        amount_lkr,
        day_of_month,
        is_active
    )
    VALUES (:user_id, :frequency, :amount_lkr, :day_of_month, :is_active)
    RETURNING plan_id
    """
)

SET_PLAN_ACTIVE_SQL = text(
    """
    UPDATE auto_invest_plans
    SET is_active = :is_active
    WHERE plan_id = :plan_id
    """
)

ALERT_COLUMNS = (
    "alert_id, user_id, target_price_per_gram_lkr, condition, is_active"
)

SELECT_ACTIVE_ALERTS_SQL = text(
    f"""
    SELECT {ALERT_COLUMNS}
    FROM price_alerts
    WHERE is_active
    ORDER BY alert_id
    """
)

SELECT_USER_ALERTS_SQL = text(
    f"""
    SELECT {ALERT_COLUMNS}
    FROM price_alerts
    WHERE user_id = :user_id
    ORDER BY alert_id
    """
)

INSERT_ALERT_SQL = text(
    """
    INSERT INTO price_alerts (
        user_id,
        target_price_per_gram_lkr,
        condition,
        is_active
    )
    VALUES (:user_id, :target_price_per_gram_lkr, :condition, :is_active)
    RETURNING alert_id
    """
)

DEACTIVATE_ALERT_SQL = text(
    "UPDATE price_alerts SET is_active = FALSE WHERE alert_id = :alert_id"
)

INSERT_NOTIFICATION_SQL = text(
    """
    INSERT INTO notifications (user_id, kind, title, message, created_at)
    VALUES (:user_id, :kind, :title, :message, :created_at)
    """
)

SELECT_LAST_SENT_SQL = text(
    "SELECT MAX(created_at) FROM notifications WHERE kind = :kind"
)


def _to_plan(row) -> AutoInvestPlan:
    return AutoInvestPlan(
        plan_id=row.plan_id,
        user_id=row.user_id,
        frequency=AutoInvestFrequency(row.frequency),
        amount_lkr=coerce_decimal(row.amount_lkr),
        day_of_month=row.day_of_month,
        is_active=bool(row.is_active),
    )


def _to_alert(row) -> PriceAlert:
    return PriceAlert(
        alert_id=row.alert_id,
        user_id=row.user_id,
        target_price_per_gram_lkr=coerce_decimal(
            row.target_price_per_gram_lkr
        ),
        condition=AlertCondition(row.condition),
        is_active=bool(row.is_active),
    )


class SqlAlchemyAutoInvestPlanRepository(AutoInvestPlanStorePort):
    """Plans stored in ``auto_invest_plans``."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def list_active_plans(self) -> list[AutoInvestPlan]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_ACTIVE_PLANS_SQL).all()
        return [_to_plan(row) for row in rows]

    def save_plan(self, plan: AutoInvestPlan) -> AutoInvestPlan:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            plan_id = conn.execute(
                INSERT_PLAN_SQL,
                {
                    "user_id": plan.user_id,
                    "frequency": plan.frequency.value,
                    "amount_lkr": plan.amount_lkr,
                    "day_of_month": plan.day_of_month,
                    "is_active": plan.is_active,
                },
            ).scalar_one()
        return AutoInvestPlan(
            plan_id=plan_id,
            user_id=plan.user_id,
            frequency=plan.frequency,
            amount_lkr=plan.amount_lkr,
            day_of_month=plan.day_of_month,
            is_active=plan.is_active,
        )

    def set_plan_active(self, plan_id: int, is_active: bool) -> bool:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                SET_PLAN_ACTIVE_SQL,
                {"plan_id": plan_id, "is_active": is_active},
            )
        return result.rowcount == 1


class SqlAlchemyPriceAlertRepository(PriceAlertStorePort):
    """Alerts stored in ``price_alerts``."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def list_active_alerts(self) -> list[PriceAlert]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_ACTIVE_ALERTS_SQL).all()
        return [_to_alert(row) for row in rows]

    def list_alerts(self, user_id: str) -> list[PriceAlert]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_USER_ALERTS_SQL, {"user_id": user_id}
            ).all()
        return [_to_alert(row) for row in rows]

    def save_alert(self, alert: PriceAlert) -> PriceAlert:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            alert_id = conn.execute(
                INSERT_ALERT_SQL,
                {
                    "user_id": alert.user_id,
                    "target_price_per_gram_lkr": (
                        alert.target_price_per_gram_lkr
                    ),
                    "condition": alert.condition.value,
                    "is_active": alert.is_active,
                },
            ).scalar_one()
        return PriceAlert(
            alert_id=alert_id,
            user_id=alert.user_id,
            target_price_per_gram_lkr=alert.target_price_per_gram_lkr,
            condition=alert.condition,
            is_active=alert.is_active,
        )

    def deactivate_alert(self, alert_id: int) -> bool:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(DEACTIVATE_ALERT_SQL, {"alert_id": alert_id})
        return result.rowcount == 1


class SqlAlchemyNotificationRepository(NotificationStorePort):
    """Notification queue stored in ``notifications``.

    Broadcast notifications have a NULL ``user_id``.
    """

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def add_notification(self, notification: Notification) -> None:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                INSERT_NOTIFICATION_SQL,
                {
                    "user_id": notification.user_id,
                    "kind": notification.kind.value,
                    "title": notification.title,
                    "message": notification.message,
                    "created_at": notification.created_at,
                },
            )

    def fetch_last_sent_at(self, kind: NotificationKind) -> datetime | None:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            value = conn.execute(
                SELECT_LAST_SENT_SQL, {"kind": kind.value}
            ).scalar_one_or_none()
        return ensure_utc(value)


__all__ = [
    "SqlAlchemyAutoInvestPlanRepository",
    "SqlAlchemyPriceAlertRepository",
    "SqlAlchemyNotificationRepository",
]
