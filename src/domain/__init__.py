"""Domain package for gold pricing rules and core models."""

from .constants import MINIMUM_DEPOSIT_LKR, TROY_OUNCE_TO_GRAMS
from .errors import (
    BelowMinimumError,
    ExpiredError,
    GoldNestError,
    NotFoundError,
    PriceUnavailableError,
    ValidationError,
)
from .models import (
    ContributionFrequency,
    DepositQuote,
    PriceRecord,
    PromoCode,
    PromoDetails,
    SipPlan,
    SipProjection,
)
from .services import (
    build_market_summary,
    compute_bonus,
    gram_to_ounce_price,
    lkr_to_grams,
    ounce_to_gram_price,
    percent_change_over_window,
    project_sip,
    quote_deposit,
    validate_promo,
)

__all__ = [
    "MINIMUM_DEPOSIT_LKR",
    "TROY_OUNCE_TO_GRAMS",
    "BelowMinimumError",
    "ExpiredError",
    "GoldNestError",
    "NotFoundError",
    "PriceUnavailableError",
    "ValidationError",
    "ContributionFrequency",
    "DepositQuote",
    "PriceRecord",
    "PromoCode",
    "PromoDetails",
    "SipPlan",
    "SipProjection",
    "build_market_summary",
    "compute_bonus",
    "gram_to_ounce_price",
    "lkr_to_grams",
    "ounce_to_gram_price",
    "percent_change_over_window",
    "project_sip",
    "quote_deposit",
    "validate_promo",
]
