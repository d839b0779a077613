"""Gold price chart presentation logic for the Streamlit UI.

This module contains pure, testable transformations from price records to
a chart series and Plotly figure. The UI is responsible for loading the
records (no IO here).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Literal
from typing import TYPE_CHECKING

from src.domain.models.pricing import PriceRecord

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


PriceUnit = Literal["gram", "ounce"]

UP_COLOR = "#2e7d32"
DOWN_COLOR = "#e76f51"
FLAT_COLOR = "#f6c453"


@dataclass(frozen=True)
class PriceSeries:
    """Chart-ready price series.

    Attributes:
        dates: Ascending record dates.
        prices: Prices in the selected unit.
        unit: ``gram`` or ``ounce``.
    """

    dates: list[date]
    prices: list[Decimal]
    unit: PriceUnit

    @property
    def is_empty(self) -> bool:
        return not self.dates

    @property
    def change(self) -> Decimal:
        """Return the last price minus the first, zero when too short."""
        if len(self.prices) < 2:
            return Decimal("0")
        return self.prices[-1] - self.prices[0]


def build_price_series(
    records: Sequence[PriceRecord],
    unit: PriceUnit = "gram",
) -> PriceSeries:
    """Order records by date and project them onto the requested unit."""
    ordered = sorted(records, key=lambda record: record.price_date)
    prices = [
        record.price_per_gram_lkr
        if unit == "gram"
        else record.price_per_troy_ounce_lkr
        for record in ordered
    ]
    return PriceSeries(
        dates=[record.price_date for record in ordered],
        prices=prices,
        unit=unit,
    )


def line_color(series: PriceSeries) -> str:
    if series.change > 0:
        return UP_COLOR
    if series.change < 0:
        return DOWN_COLOR
    return FLAT_COLOR


def build_price_figure(series: PriceSeries, height: int = 360) -> "go.Figure":
    """Build a Plotly line chart of the price series.

    Args:
        series: Series returned by ``build_price_series``.
        height: Figure height in pixels.

    Returns:
        go.Figure: Line chart with a hover label per day.
    """
    import plotly.graph_objects as go

    label = "LKR / g" if series.unit == "gram" else "LKR / oz"
    fig = go.Figure(
        data=[
            go.Scatter(
                x=series.dates,
                y=[float(price) for price in series.prices],
                mode="lines+markers",
                line=dict(color=line_color(series), width=2),
                marker=dict(size=5),
                hovertemplate=f"%{{x|%Y-%m-%d}}<br>%{{y:,.2f}} {label}"
                "<extra></extra>",
            )
        ]
    )
    fig.update_layout(
        margin=dict(l=8, r=8, t=8, b=8),
        height=height,
        yaxis_title=label,
        xaxis_title=None,
    )
    return fig


__all__ = [
    "PriceSeries",
    "build_price_series",
    "line_color",
    "build_price_figure",
]
