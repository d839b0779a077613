"""Aggregations over the daily gold price history."""

from collections.abc import Sequence
from datetime import timedelta
from decimal import Decimal

from src.domain.constants import (
    PREDICTION_DAYS,
    PRICE_CHANGE_WINDOWS,
    RECENT_HISTORY_DAYS,
    TREND_THRESHOLD_PERCENT,
)
from src.domain.models.pricing import MarketSummary, PriceChange, PriceRecord

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def _ordered(history: Sequence[PriceRecord]) -> list[PriceRecord]:
    return sorted(history, key=lambda record: record.price_date)


def percent_change_over_window(
    history: Sequence[PriceRecord],
    days: int,
) -> PriceChange:
    """Compute the percent change of the latest price over ``days`` days.

    The reference is the most recent record dated on or before
    ``latest_date - days``.

    Args:
        history: Daily price records.
        days: Look-back window in calendar days.

    Returns:
        PriceChange: Signed percent change, or an unavailable change when
        history is shorter than the window.
    """
    ordered = _ordered(history)
    if len(ordered) < days + 1:
        return PriceChange(window_days=days, percent_change=None)

    latest = ordered[-1]
    target_date = latest.price_date - timedelta(days=days)
    reference = None
    for record in reversed(ordered[:-1]):
        if record.price_date <= target_date:
            reference = record
            break
    if reference is None or reference.price_per_troy_ounce_lkr <= 0:
        return PriceChange(window_days=days, percent_change=None)

    past_price = reference.price_per_gram_lkr
    change = (latest.price_per_gram_lkr - past_price) / past_price * _HUNDRED
    return PriceChange(
        window_days=days,
        percent_change=change,
        reference_date=reference.price_date,
    )


def compute_price_changes(
    history: Sequence[PriceRecord],
    windows: Sequence[int] = PRICE_CHANGE_WINDOWS,
) -> dict[int, PriceChange]:
    """Return one PriceChange per window, each computed independently."""
    return {
        days: percent_change_over_window(history, days) for days in windows
    }


def classify_trend(change: PriceChange) -> str:
    """Return ``up``, ``down`` or ``stable`` for a daily change."""
    if change.percent_change is None:
        return "stable"
    if change.percent_change > TREND_THRESHOLD_PERCENT:
        return "up"
    if change.percent_change < -TREND_THRESHOLD_PERCENT:
        return "down"
    return "stable"


def predict_next_price(
    history: Sequence[PriceRecord],
    days: int = PREDICTION_DAYS,
) -> tuple[Decimal, Decimal] | None:
    """Extrapolate tomorrow's gram price from recent daily moves.

    Applies the mean relative change of the last ``days`` consecutive
    records to the latest price.

    Returns:
        tuple[Decimal, Decimal] | None: Predicted gram price and predicted
        change in percent, or None when history is too short.
    """
    ordered = _ordered(history)
    if len(ordered) < days + 1:
        return None
    window = ordered[-(days + 1):]
    changes = [
        (current.price_per_troy_ounce_lkr - previous.price_per_troy_ounce_lkr)
        / previous.price_per_troy_ounce_lkr
        for previous, current in zip(window, window[1:])
        if previous.price_per_troy_ounce_lkr > 0
    ]
    if not changes:
        return None
    average = sum(changes, _ZERO) / len(changes)
    predicted = max(_ZERO, ordered[-1].price_per_gram_lkr * (1 + average))
    return predicted, average * _HUNDRED


def build_market_summary(history: Sequence[PriceRecord]) -> MarketSummary:
    """Summarize the price history for the market view.

    Args:
        history: Daily price records in any order.

    Returns:
        MarketSummary: Latest price, look-back changes, trend, the last
        week of records (ascending) and a naive next-day prediction.
    """
    ordered = _ordered(history)
    daily, weekly, monthly = PRICE_CHANGE_WINDOWS
    changes = compute_price_changes(ordered)
    if not ordered:
        return MarketSummary(
            latest_date=None,
            latest_price_per_gram_lkr=_ZERO,
            latest_price_per_troy_ounce_lkr=_ZERO,
            daily_change=changes[daily],
            weekly_change=changes[weekly],
            monthly_change=changes[monthly],
            trend="stable",
            recent_history=[],
        )

    latest = ordered[-1]
    prediction = predict_next_price(ordered)
    return MarketSummary(
        latest_date=latest.price_date,
        latest_price_per_gram_lkr=latest.price_per_gram_lkr,
        latest_price_per_troy_ounce_lkr=latest.price_per_troy_ounce_lkr,
        daily_change=changes[daily],
        weekly_change=changes[weekly],
        monthly_change=changes[monthly],
        trend=classify_trend(changes[daily]),
        recent_history=ordered[-RECENT_HISTORY_DAYS:],
        predicted_price_per_gram_lkr=prediction[0] if prediction else None,
        predicted_change_percent=prediction[1] if prediction else None,
    )


__all__ = [
    "percent_change_over_window",
    "compute_price_changes",
    "classify_trend",
    "predict_next_price",
    "build_market_summary",
]
