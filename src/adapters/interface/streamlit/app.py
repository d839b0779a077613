"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal

import streamlit as st
import altair as alt

from src.adapters.interface.streamlit.price_chart import (
    build_price_figure,
    build_price_series,
)
from src.application.use_cases.project_sip import ProjectSipUseCase
from src.domain.errors import ValidationError
from src.domain.models.pricing import MarketSummary, PriceChange, PriceRecord
from src.domain.models.projections import SipProjection
from src.domain.services.sip import chart_invested_percent
from src.infrastructure.container import build_market_summary_use_case

INVESTED_COLOR = "#f6c453"
RETURNS_COLOR = "#2e7d32"


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Verify numpy and pandas imports are usable for Altair charts."""
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Chart dependencies are missing: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "numpy import is incomplete; reinstall numpy."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas import is incomplete; reinstall pandas."
    return True, None


def _fetch_market_summary() -> MarketSummary:
    """Build the market summary from the platform database."""
    return build_market_summary_use_case().execute()


@st.cache_data(show_spinner=False, ttl=600)
def _load_market_summary() -> MarketSummary:
    """Cached wrapper around _fetch_market_summary."""
    return _fetch_market_summary()


def _fetch_price_history(days: int) -> Sequence[PriceRecord]:
    """Fetch the last ``days`` days of prices."""
    return build_market_summary_use_case().load_history(days)


@st.cache_data(show_spinner=False, ttl=600)
def _load_price_history(days: int) -> Sequence[PriceRecord]:
    """Cached wrapper around _fetch_price_history."""
    return _fetch_price_history(days)


def _format_lkr(value: Decimal) -> str:
    """Format LKR values for display."""
    return f"LKR {value:,.2f}"


def _format_change(change: PriceChange) -> str | None:
    """Format a look-back change; None hides the metric delta."""
    if not change.is_available:
        return None
    sign = "+" if change.percent_change >= 0 else ""
    return f"{sign}{change.percent_change:.2f}%"


def _prepare_sip_chart_data(
    projection: SipProjection,
) -> list[dict[str, str | float]]:
    """Prepare donut chart data for a SIP projection.

    Slices keep a minimum visible share so neither side disappears.
    """
    if projection.total_value <= 0:
        return []
    invested_share = chart_invested_percent(projection)
    returns_share = Decimal("100") - invested_share
    return [
        {
            "category": "Invested",
            "share": float(invested_share),
            "amount_label": _format_lkr(projection.total_invested),
        },
        {
            "category": "Estimated returns",
            "share": float(returns_share),
            "amount_label": _format_lkr(projection.estimated_returns),
        },
    ]


def _render_sip_chart(
    projection: SipProjection,
    chart_size: int = 300,
) -> None:
    """Render the invested/returns donut chart."""
    data = _prepare_sip_chart_data(projection)
    if not data:
        st.info("Enter positive values to see the projection chart.")
        return
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        return

    chart = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("share:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=[INVESTED_COLOR, RETURNS_COLOR]),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
        ],
    ).properties(
        width=chart_size,
        height=chart_size,
    ).configure_view(
        stroke=None
    )
    st.altair_chart(chart, width="stretch")


def _render_sip_calculator() -> None:
    """Render the SIP calculator form and its projection."""
    st.subheader("SIP Calculator")
    frequency = st.radio(
        "Contribution frequency",
        ["monthly", "yearly"],
        horizontal=True,
    )
    amount_col, period_col, rate_col = st.columns(3)
    amount = amount_col.number_input(
        "Contribution (LKR)", min_value=0.0, value=10000.0, step=1000.0
    )
    period = period_col.number_input(
        "Period (years)", min_value=0.0, value=10.0, step=1.0
    )
    rate = rate_col.number_input(
        "Expected return (% p.a.)", min_value=0.0, value=12.0, step=0.5
    )
    try:
        projection = ProjectSipUseCase().execute(frequency, amount, period, rate)
    except ValidationError as exc:
        st.error(str(exc))
        return

    invested_col, returns_col, total_col = st.columns(3)
    invested_col.metric("Invested", _format_lkr(projection.total_invested))
    returns_col.metric(
        "Estimated returns", _format_lkr(projection.estimated_returns)
    )
    total_col.metric("Total value", _format_lkr(projection.total_value))
    _render_sip_chart(projection)


def _render_market(summary: MarketSummary) -> None:
    """Render latest price metrics, trend and the history chart."""
    st.subheader("Gold Market")
    if summary.latest_date is None:
        st.warning("No gold prices recorded yet. Import the history first.")
        return
    st.caption(f"Latest price from {summary.latest_date:%Y-%m-%d}")
    gram_col, day_col, week_col, month_col = st.columns(4)
    gram_col.metric(
        "Price per gram",
        _format_lkr(summary.latest_price_per_gram_lkr),
        _format_change(summary.daily_change),
    )
    day_col.metric("Trend", summary.trend.capitalize())
    week_col.metric("7 days", _format_change(summary.weekly_change) or "n/a")
    month_col.metric(
        "30 days", _format_change(summary.monthly_change) or "n/a"
    )
    if summary.predicted_price_per_gram_lkr is not None:
        st.caption(
            "Naive next-day estimate: "
            f"{_format_lkr(summary.predicted_price_per_gram_lkr)} per gram"
        )

    days = st.selectbox("History", [7, 30, 90, 365], index=1)
    unit = st.radio("Unit", ["gram", "ounce"], horizontal=True)
    series = build_price_series(_load_price_history(days), unit=unit)
    if series.is_empty:
        st.info("No prices in the selected range.")
        return
    st.plotly_chart(build_price_figure(series), width="stretch")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="GoldNest", layout="wide")
    st.title("GoldNest")

    page = st.sidebar.selectbox("Page", ["Market", "SIP Calculator"])
    if page == "Market":
        _render_market(_load_market_summary())
    else:
        _render_sip_calculator()


if __name__ == "__main__":  # pragma: no cover
    main()
