"""Domain constants for gold pricing and wallet accrual."""

from decimal import Decimal

TROY_OUNCE_TO_GRAMS = Decimal("31.1034768")

MINIMUM_DEPOSIT_LKR = Decimal("100")
MINIMUM_INVESTMENT_LKR = Decimal("100")
MAXIMUM_DEPOSIT_LKR = Decimal("1000000")
MINIMUM_SELL_GRAMS = Decimal("0.001")

DEFAULT_BUY_FEE_RATE = Decimal("0.01")
DEFAULT_SELL_FEE_RATE = Decimal("0.005")
DEFAULT_REDEMPTION_DELIVERY_LKR = Decimal("2000")

# Look-back windows in calendar days for 24h, 7d and 30d changes.
PRICE_CHANGE_WINDOWS = (1, 7, 30)
TREND_THRESHOLD_PERCENT = Decimal("0.5")
PREDICTION_DAYS = 5
RECENT_HISTORY_DAYS = 7

CHART_MIN_VISIBLE_PERCENT = Decimal("0.5")

REDEMPTION_ITEM_GRAMS = {
    "1g": Decimal("1"),
    "5g": Decimal("5"),
    "10g": Decimal("10"),
}
DELIVERY_LEAD_DAYS = 3

# Weekly plans run on Mondays; monthly plans on days 1-28 so every month
# has the run day.
AUTO_INVEST_WEEKLY_WEEKDAY = 0
MAX_AUTO_INVEST_DAY_OF_MONTH = 28

MARKET_MOVEMENT_THRESHOLD_PERCENT = Decimal("2")
MARKET_ALERT_COOLDOWN_HOURS = 6
MAX_PRICE_ALERTS_PER_USER = 10


__all__ = [
    "TROY_OUNCE_TO_GRAMS",
    "MINIMUM_DEPOSIT_LKR",
    "MINIMUM_INVESTMENT_LKR",
    "MAXIMUM_DEPOSIT_LKR",
    "MINIMUM_SELL_GRAMS",
    "DEFAULT_BUY_FEE_RATE",
    "DEFAULT_SELL_FEE_RATE",
    "DEFAULT_REDEMPTION_DELIVERY_LKR",
    "PRICE_CHANGE_WINDOWS",
    "TREND_THRESHOLD_PERCENT",
    "PREDICTION_DAYS",
    "RECENT_HISTORY_DAYS",
    "CHART_MIN_VISIBLE_PERCENT",
    "REDEMPTION_ITEM_GRAMS",
    "DELIVERY_LEAD_DAYS",
    "AUTO_INVEST_WEEKLY_WEEKDAY",
    "MAX_AUTO_INVEST_DAY_OF_MONTH",
    "MARKET_MOVEMENT_THRESHOLD_PERCENT",
    "MARKET_ALERT_COOLDOWN_HOURS",
    "MAX_PRICE_ALERTS_PER_USER",
]
