"""Tests for price history aggregation."""

from datetime import date, timedelta
from decimal import Decimal

from src.domain.constants import TROY_OUNCE_TO_GRAMS
from src.domain.models.pricing import PriceRecord
from src.domain.services.price_history import (
    build_market_summary,
    classify_trend,
    compute_price_changes,
    percent_change_over_window,
    predict_next_price,
)

START = date(2024, 1, 1)


def _records(gram_prices: list[str], start: date = START) -> list[PriceRecord]:
    return [
        PriceRecord(
            price_date=start + timedelta(days=offset),
            price_per_troy_ounce_lkr=Decimal(price) * TROY_OUNCE_TO_GRAMS,
        )
        for offset, price in enumerate(gram_prices)
    ]


def test_daily_change_compares_latest_with_previous_day() -> None:
    change = percent_change_over_window(_records(["100", "110"]), 1)

    assert change.percent_change == Decimal("10")
    assert change.reference_date == START


def test_window_is_unavailable_with_short_history() -> None:
    change = percent_change_over_window(_records(["100"] * 7), 7)

    assert change.percent_change is None
    assert not change.is_available


def test_window_uses_latest_record_on_or_before_target_date() -> None:
    # No price was recorded on START + 1 day.
    gapped = _records(["100"]) + _records(
        ["120", "125"], start=START + timedelta(days=2)
    )

    change = percent_change_over_window(gapped, 2)

    assert change.reference_date == START
    assert change.percent_change == Decimal("25")


def test_changes_ignore_input_order() -> None:
    records = _records(["100", "90"])

    change = percent_change_over_window(list(reversed(records)), 1)

    assert change.percent_change == Decimal("-10")


def test_windows_are_independent() -> None:
    changes = compute_price_changes(_records(["100"] * 7 + ["150"]))

    assert changes[1].percent_change == Decimal("50")
    assert changes[7].percent_change == Decimal("50")
    assert changes[30].percent_change is None


def test_zero_reference_price_is_unavailable() -> None:
    change = percent_change_over_window(_records(["0", "100"]), 1)

    assert change.percent_change is None


def test_classify_trend_thresholds() -> None:
    up = percent_change_over_window(_records(["100", "100.6"]), 1)
    flat = percent_change_over_window(_records(["100", "100.5"]), 1)
    down = percent_change_over_window(_records(["100", "99.4"]), 1)
    missing = percent_change_over_window(_records(["100"]), 1)

    assert classify_trend(up) == "up"
    assert classify_trend(flat) == "stable"
    assert classify_trend(down) == "down"
    assert classify_trend(missing) == "stable"


def test_prediction_applies_mean_daily_change() -> None:
    records = _records(["100", "110", "121", "133.1", "146.41", "161.051"])

    predicted = predict_next_price(records)

    assert predicted is not None
    price, percent = predicted
    assert price.quantize(Decimal("0.001")) == Decimal("177.156")
    assert percent.quantize(Decimal("0.01")) == Decimal("10.00")


def test_prediction_requires_enough_history() -> None:
    assert predict_next_price(_records(["100"] * 5)) is None


def test_market_summary_for_full_month() -> None:
    prices = ["100"] * 30 + ["102"]

    summary = build_market_summary(_records(prices))

    assert summary.latest_date == START + timedelta(days=30)
    assert summary.latest_price_per_gram_lkr == Decimal("102")
    assert summary.daily_change.percent_change == Decimal("2")
    assert summary.monthly_change.percent_change == Decimal("2")
    assert summary.trend == "up"
    assert len(summary.recent_history) == 7
    assert summary.recent_history[-1].price_date == summary.latest_date


def test_market_summary_for_empty_history() -> None:
    summary = build_market_summary([])

    assert summary.latest_date is None
    assert summary.latest_price_per_gram_lkr == Decimal("0")
    assert summary.trend == "stable"
    assert summary.recent_history == []
    assert summary.predicted_price_per_gram_lkr is None
