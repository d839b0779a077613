"""Composition root for wiring infrastructure adapters."""

from src.application.ports.audit_log import AuditLogPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_store import LedgerStorePort
from src.application.ports.price_source import PriceSourcePort
from src.application.ports.promo_store import PromoStorePort
from src.application.ports.schedule_store import (
    AutoInvestPlanStorePort,
    NotificationStorePort,
    PriceAlertStorePort,
)
from src.application.ports.settings_store import SettingsStorePort
from src.application.use_cases.deposit_funds import DepositFundsUseCase
from src.application.use_cases.auto_invest import RunAutoInvestmentsUseCase
from src.application.use_cases.get_market_summary import (
    GetMarketSummaryUseCase,
)
from src.application.use_cases.price_alerts import CheckPriceAlertsUseCase
from src.infrastructure.audit_log_repository import (
    SqlAlchemyAuditLogRepository,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.price_repository import SqlAlchemyPriceRepository
from src.infrastructure.promo_repository import SqlAlchemyPromoRepository
from src.infrastructure.schedule_repository import (
    SqlAlchemyAutoInvestPlanRepository,
    SqlAlchemyNotificationRepository,
    SqlAlchemyPriceAlertRepository,
)
from src.infrastructure.settings import GoldNestSettings
from src.infrastructure.settings_repository import (
    SqlAlchemySettingsRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_price_repository(
    db_port: DatabaseEnginePort | None = None,
) -> PriceSourcePort:
    """Return the gold price repository."""
    return SqlAlchemyPriceRepository(db_port or build_database_adapter())


def build_promo_repository(
    db_port: DatabaseEnginePort | None = None,
) -> PromoStorePort:
    """Return the promo code repository."""
    return SqlAlchemyPromoRepository(db_port or build_database_adapter())


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerStorePort:
    """Return the wallet ledger repository."""
    return SqlAlchemyLedgerRepository(db_port or build_database_adapter())


def build_settings_repository(
    db_port: DatabaseEnginePort | None = None,
) -> SettingsStorePort:
    """Return the platform settings repository."""
    return SqlAlchemySettingsRepository(db_port or build_database_adapter())


def build_audit_log_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AuditLogPort:
    """Return the admin audit log repository."""
    return SqlAlchemyAuditLogRepository(db_port or build_database_adapter())


def build_deposit_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: GoldNestSettings | None = None,
) -> DepositFundsUseCase:
    """Return the deposit use case configured from the environment."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or GoldNestSettings.from_env()
    return DepositFundsUseCase(
        build_ledger_repository(resolved_db),
        build_promo_repository(resolved_db),
        logger=get_usage_logger(),
        reject_invalid_promos=resolved_settings.reject_invalid_promos,
        maximum_lkr=resolved_settings.maximum_deposit_lkr,
    )


def build_market_summary_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: GoldNestSettings | None = None,
) -> GetMarketSummaryUseCase:
    """Return the market summary use case."""
    resolved_settings = settings or GoldNestSettings.from_env()
    return GetMarketSummaryUseCase(
        build_price_repository(db_port),
        history_days=resolved_settings.market_history_days,
    )



def build_auto_invest_plan_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AutoInvestPlanStorePort:
    """Return the auto-invest plan repository."""
    return SqlAlchemyAutoInvestPlanRepository(
        db_port or build_database_adapter()
    )


def build_price_alert_repository(
    db_port: DatabaseEnginePort | None = None,
) -> PriceAlertStorePort:
    """Return the price alert repository."""
    return SqlAlchemyPriceAlertRepository(db_port or build_database_adapter())


def build_notification_repository(
    db_port: DatabaseEnginePort | None = None,
) -> NotificationStorePort:
    """Return the notification queue repository."""
    return SqlAlchemyNotificationRepository(
        db_port or build_database_adapter()
    )


def build_run_auto_investments_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> RunAutoInvestmentsUseCase:
    """Return the scheduled auto-invest job on one shared engine."""
    resolved_db = db_port or build_database_adapter()
    return RunAutoInvestmentsUseCase(
        build_auto_invest_plan_repository(resolved_db),
        build_price_repository(resolved_db),
        build_ledger_repository(resolved_db),
        build_notification_repository(resolved_db),
        settings_store=build_settings_repository(resolved_db),
        logger=get_usage_logger(),
    )


def build_check_price_alerts_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: GoldNestSettings | None = None,
) -> CheckPriceAlertsUseCase:
    """Return the scheduled price alert job."""
    resolved_db = db_port or build_database_adapter()
    return CheckPriceAlertsUseCase(
        build_market_summary_use_case(resolved_db, settings),
        build_price_alert_repository(resolved_db),
        build_notification_repository(resolved_db),
        logger=get_app_logger(),
    )

__all__ = [
    "build_database_adapter",
    "build_price_repository",
    "build_promo_repository",
    "build_ledger_repository",
    "build_settings_repository",
    "build_audit_log_repository",
    "build_deposit_use_case",
    "build_market_summary_use_case",
    "build_auto_invest_plan_repository",
    "build_price_alert_repository",
    "build_notification_repository",
    "build_run_auto_investments_use_case",
    "build_check_price_alerts_use_case",
]
