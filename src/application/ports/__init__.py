"""Application ports package."""

from .audit_log import AuditLogPort
from .database import DatabaseEnginePort
from .ledger_store import LedgerStorePort
from .price_source import PriceScraperPort, PriceSourcePort
from .promo_store import PromoStorePort
from .schedule_store import (
    AutoInvestPlanStorePort,
    NotificationStorePort,
    PriceAlertStorePort,
)
from .settings_store import SettingsStorePort

__all__ = [
    "AuditLogPort",
    "DatabaseEnginePort",
    "LedgerStorePort",
    "PriceScraperPort",
    "PriceSourcePort",
    "PromoStorePort",
    "AutoInvestPlanStorePort",
    "NotificationStorePort",
    "PriceAlertStorePort",
    "SettingsStorePort",
]
