"""Tests for the gold price chart helpers."""

from datetime import date
from decimal import Decimal

from src.adapters.interface.streamlit.price_chart import (
    DOWN_COLOR,
    FLAT_COLOR,
    UP_COLOR,
    PriceSeries,
    build_price_figure,
    build_price_series,
    line_color,
)
from src.domain.models.pricing import PriceRecord


def _records() -> list[PriceRecord]:
    return [
        PriceRecord(date(2024, 6, 3), Decimal("311034.768")),
        PriceRecord(date(2024, 6, 1), Decimal("280000")),
    ]


def test_build_price_series_sorts_and_converts_to_grams():
    series = build_price_series(_records())

    assert series.dates == [date(2024, 6, 1), date(2024, 6, 3)]
    assert series.prices[1] == Decimal("10000.00")
    assert series.unit == "gram"
    assert series.change > 0


def test_build_price_series_keeps_ounce_prices():
    series = build_price_series(_records(), unit="ounce")

    assert series.prices == [Decimal("280000"), Decimal("311034.768")]


def test_empty_series():
    series = build_price_series([])

    assert series.is_empty
    assert series.change == Decimal("0")
    assert line_color(series) == FLAT_COLOR


def test_line_color_follows_direction():
    rising = PriceSeries(
        dates=[date(2024, 6, 1), date(2024, 6, 2)],
        prices=[Decimal("1"), Decimal("2")],
        unit="gram",
    )
    falling = PriceSeries(
        dates=rising.dates,
        prices=[Decimal("2"), Decimal("1")],
        unit="gram",
    )

    assert line_color(rising) == UP_COLOR
    assert line_color(falling) == DOWN_COLOR


def test_build_price_figure_plots_floats():
    series = build_price_series(_records(), unit="ounce")

    fig = build_price_figure(series, height=200)

    trace = fig.data[0]
    assert list(trace.y) == [280000.0, 311034.768]
    assert fig.layout.height == 200
    assert fig.layout.yaxis.title.text == "LKR / oz"
