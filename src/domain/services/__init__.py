"""Domain services package."""

from .conversion import (
    gram_to_ounce_price,
    grams_to_lkr,
    lkr_to_grams,
    ounce_to_gram_price,
)
from .deposits import compute_bonus, quote_deposit
from .normalization import normalize_item_size, normalize_promo_code
from .price_history import (
    build_market_summary,
    classify_trend,
    compute_price_changes,
    percent_change_over_window,
    predict_next_price,
)
from .promos import build_bonus_rule, is_promo_active, validate_promo
from .schedules import (
    build_auto_invest_plan,
    build_price_alert,
    is_alert_triggered,
    is_cooldown_elapsed,
    is_plan_due,
    is_significant_movement,
)
from .sip import chart_invested_percent, project_sip
from .trades import (
    estimate_delivery_date,
    fee_schedule_from_settings,
    quote_purchase,
    quote_redemption,
    quote_sale,
)
from .validation import parse_amount, require_minimum, require_positive

__all__ = [
    "gram_to_ounce_price",
    "grams_to_lkr",
    "lkr_to_grams",
    "ounce_to_gram_price",
    "compute_bonus",
    "quote_deposit",
    "normalize_item_size",
    "normalize_promo_code",
    "build_market_summary",
    "classify_trend",
    "compute_price_changes",
    "percent_change_over_window",
    "predict_next_price",
    "build_bonus_rule",
    "is_promo_active",
    "validate_promo",
    "build_auto_invest_plan",
    "build_price_alert",
    "is_alert_triggered",
    "is_cooldown_elapsed",
    "is_plan_due",
    "is_significant_movement",
    "chart_invested_percent",
    "project_sip",
    "estimate_delivery_date",
    "fee_schedule_from_settings",
    "quote_purchase",
    "quote_redemption",
    "quote_sale",
    "parse_amount",
    "require_minimum",
    "require_positive",
]
