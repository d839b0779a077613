"""Tests for the Streamlit app module."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.adapters.interface.streamlit import app
from src.domain.models.pricing import MarketSummary, PriceChange
from src.domain.models.projections import SipProjection
from src.infrastructure import container
from src.infrastructure import settings as settings_module


def _summary(latest_date=date(2024, 6, 3)) -> MarketSummary:
    return MarketSummary(
        latest_date=latest_date,
        latest_price_per_gram_lkr=Decimal("22500.00"),
        latest_price_per_troy_ounce_lkr=Decimal("699828.23"),
        daily_change=PriceChange(
            window_days=1,
            percent_change=Decimal("1.25"),
            reference_date=date(2024, 6, 2),
        ),
        weekly_change=PriceChange(window_days=7, percent_change=None),
        monthly_change=PriceChange(
            window_days=30,
            percent_change=Decimal("-0.50"),
            reference_date=date(2024, 5, 4),
        ),
        trend="up",
        recent_history=[],
    )


def test_fetch_market_summary_uses_container_builder(monkeypatch):
    """_fetch_market_summary should use the configured use case."""
    summary = _summary()

    class _FakeUseCase:
        def execute(self):
            return summary

    monkeypatch.setattr(
        app, "build_market_summary_use_case", lambda: _FakeUseCase()
    )

    assert app._fetch_market_summary() is summary


def test_fetch_market_summary_honors_history_setting(monkeypatch):
    monkeypatch.setenv("GOLDNEST_MARKET_HISTORY_DAYS", "90")
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", MagicMock)
    monkeypatch.setattr(
        container, "build_database_adapter", lambda: MagicMock()
    )
    captured = {}

    class _FakeUseCase:
        def __init__(self, price_source, history_days):
            captured["history_days"] = history_days

        def execute(self):
            return "summary"

    monkeypatch.setattr(container, "GetMarketSummaryUseCase", _FakeUseCase)

    assert app._fetch_market_summary() == "summary"
    assert captured["history_days"] == 90


def test_fetch_price_history_passes_days(monkeypatch):
    requested = []

    class _FakeUseCase:
        def load_history(self, days):
            requested.append(days)
            return ["record"]

    monkeypatch.setattr(
        app, "build_market_summary_use_case", lambda: _FakeUseCase()
    )

    assert app._fetch_price_history(90) == ["record"]
    assert requested == [90]


def test_format_change_hides_unavailable_windows():
    summary = _summary()

    assert app._format_change(summary.daily_change) == "+1.25%"
    assert app._format_change(summary.monthly_change) == "-0.50%"
    assert app._format_change(summary.weekly_change) is None


def test_format_lkr_uses_thousands_separator():
    assert app._format_lkr(Decimal("1234567.891")) == "LKR 1,234,567.89"


def test_prepare_sip_chart_data_keeps_both_slices_visible():
    projection = SipProjection(
        total_invested=Decimal("120000"),
        estimated_returns=Decimal("0"),
        total_value=Decimal("120000"),
        invested_percent=Decimal("100"),
    )

    data = app._prepare_sip_chart_data(projection)

    assert [row["category"] for row in data] == [
        "Invested",
        "Estimated returns",
    ]
    assert data[0]["share"] == 99.5
    assert data[1]["share"] == 0.5
    assert data[0]["amount_label"] == "LKR 120,000.00"


def test_prepare_sip_chart_data_empty_for_zero_projection():
    projection = SipProjection(
        total_invested=Decimal("0"),
        estimated_returns=Decimal("0"),
        total_value=Decimal("0"),
        invested_percent=Decimal("0"),
    )

    assert app._prepare_sip_chart_data(projection) == []


class _FakeColumn:
    def __init__(self, owner) -> None:
        self._owner = owner

    def metric(self, label, value, delta=None):
        self._owner.metrics.append((label, value, delta))

    def number_input(self, label, **kwargs):
        return kwargs["value"]


class _FakeSidebar:
    def __init__(self, page: str) -> None:
        self._page = page

    def selectbox(self, label, options):
        assert self._page in options
        return self._page


class _FakeStreamlit:
    def __init__(self, page: str = "Market") -> None:
        self.sidebar = _FakeSidebar(page)
        self.config_kwargs = None
        self.title_text = None
        self.subheaders: list[str] = []
        self.captions: list[str] = []
        self.warnings: list[str] = []
        self.infos: list[str] = []
        self.metrics: list[tuple] = []
        self.plotly_payload = None

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def subheader(self, text: str):
        self.subheaders.append(text)

    def caption(self, text: str):
        self.captions.append(text)

    def warning(self, text: str):
        self.warnings.append(text)

    def info(self, text: str):
        self.infos.append(text)

    def error(self, text: str):  # pragma: no cover
        raise AssertionError(text)

    def columns(self, count: int):
        return [_FakeColumn(self) for _ in range(count)]

    def selectbox(self, label, options, index=0):
        return options[index]

    def radio(self, label, options, horizontal=False):
        return options[0]

    def plotly_chart(self, figure, width=None):
        self.plotly_payload = figure

    def altair_chart(self, chart, width=None):
        self.altair_payload = chart


def test_main_renders_market_page(monkeypatch):
    fake_st = _FakeStreamlit("Market")
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_market_summary", _summary)
    monkeypatch.setattr(app, "_load_price_history", lambda days: [])

    app.main()

    assert fake_st.config_kwargs["page_title"] == "GoldNest"
    assert fake_st.subheaders == ["Gold Market"]
    assert ("Price per gram", "LKR 22,500.00", "+1.25%") in fake_st.metrics
    assert ("7 days", "n/a", None) in fake_st.metrics
    assert fake_st.infos == ["No prices in the selected range."]


def test_market_page_warns_without_prices(monkeypatch):
    fake_st = _FakeStreamlit("Market")
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app,
        "_load_market_summary",
        lambda: _summary(latest_date=None),
    )

    app.main()

    assert fake_st.warnings
    assert fake_st.metrics == []


def test_main_renders_sip_calculator(monkeypatch):
    fake_st = _FakeStreamlit("SIP Calculator")
    rendered = []
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_render_sip_chart", rendered.append)

    app.main()

    assert fake_st.subheaders == ["SIP Calculator"]
    labels = [metric[0] for metric in fake_st.metrics]
    assert labels == ["Invested", "Estimated returns", "Total value"]
    assert rendered[0].total_invested == Decimal("1200000.00")
