"""Domain models package."""

from .audit import (
    ActionUndone,
    AdminAction,
    AuditLogEntry,
    FeeSettingsUpdated,
    PromoCodeCreated,
    PromoCodeDeleted,
)
from .ledger import (
    LedgerEntry,
    LedgerTransaction,
    TransactionKind,
    TransactionStatus,
    WalletBalance,
)
from .pricing import MarketSummary, PriceChange, PriceRecord
from .projections import ContributionFrequency, SipPlan, SipProjection
from .promos import (
    BonusRule,
    FlatLkrDepositBonus,
    PercentageDepositBonus,
    PromoCode,
    PromoDetails,
    PromoType,
)
from .quotes import (
    DepositQuote,
    FeeSchedule,
    PurchaseQuote,
    RedemptionQuote,
    SaleQuote,
)
from .schedules import (
    AlertCondition,
    AutoInvestFrequency,
    AutoInvestPlan,
    Notification,
    NotificationKind,
    PriceAlert,
)

__all__ = [
    "ActionUndone",
    "AdminAction",
    "AuditLogEntry",
    "FeeSettingsUpdated",
    "PromoCodeCreated",
    "PromoCodeDeleted",
    "LedgerEntry",
    "LedgerTransaction",
    "TransactionKind",
    "TransactionStatus",
    "WalletBalance",
    "MarketSummary",
    "PriceChange",
    "PriceRecord",
    "ContributionFrequency",
    "SipPlan",
    "SipProjection",
    "BonusRule",
    "FlatLkrDepositBonus",
    "PercentageDepositBonus",
    "PromoCode",
    "PromoDetails",
    "PromoType",
    "DepositQuote",
    "FeeSchedule",
    "PurchaseQuote",
    "RedemptionQuote",
    "SaleQuote",
    "AlertCondition",
    "AutoInvestFrequency",
    "AutoInvestPlan",
    "Notification",
    "NotificationKind",
    "PriceAlert",
]
