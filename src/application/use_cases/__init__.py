"""Application use cases package."""

from .admin_promos import CreatePromoCodeUseCase, DeletePromoCodeUseCase
from .auto_invest import (
    AutoInvestRunSummary,
    CreateAutoInvestPlanUseCase,
    RunAutoInvestmentsUseCase,
    SetAutoInvestPlanActiveUseCase,
)
from .buy_gold import BuyGoldUseCase, TradeResult
from .deposit_funds import DepositFundsUseCase, DepositResult
from .get_market_summary import GetMarketSummaryUseCase
from .import_price_history import ImportPriceHistoryUseCase, ImportSummary
from .price_alerts import (
    AlertCheckResult,
    CheckPriceAlertsUseCase,
    CreatePriceAlertUseCase,
)
from .project_sip import ProjectSipUseCase
from .quote_gold import GoldQuote, QuoteGoldUseCase
from .record_daily_price import RecordDailyPriceUseCase
from .redeem_gold import RedeemGoldUseCase, RedemptionResult
from .sell_gold import SaleResult, SellGoldUseCase
from .undo_admin_action import UndoAdminActionUseCase
from .update_fee_settings import UpdateFeeSettingsUseCase
from .validate_promo import ValidatePromoUseCase
from .withdraw_funds import WithdrawFundsUseCase

__all__ = [
    "CreatePromoCodeUseCase",
    "DeletePromoCodeUseCase",
    "AutoInvestRunSummary",
    "CreateAutoInvestPlanUseCase",
    "RunAutoInvestmentsUseCase",
    "SetAutoInvestPlanActiveUseCase",
    "BuyGoldUseCase",
    "TradeResult",
    "DepositFundsUseCase",
    "DepositResult",
    "GetMarketSummaryUseCase",
    "ImportPriceHistoryUseCase",
    "ImportSummary",
    "AlertCheckResult",
    "CheckPriceAlertsUseCase",
    "CreatePriceAlertUseCase",
    "ProjectSipUseCase",
    "GoldQuote",
    "QuoteGoldUseCase",
    "RecordDailyPriceUseCase",
    "RedeemGoldUseCase",
    "RedemptionResult",
    "SaleResult",
    "SellGoldUseCase",
    "UndoAdminActionUseCase",
    "UpdateFeeSettingsUseCase",
    "ValidatePromoUseCase",
    "WithdrawFundsUseCase",
]
