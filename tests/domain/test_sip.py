"""Tests for the SIP projection."""

from decimal import Decimal

import pytest

from src.domain.models.projections import (
    ContributionFrequency,
    SipPlan,
    SipProjection,
)
from src.domain.services.sip import chart_invested_percent, project_sip


def _plan(frequency, amount, years, rate) -> SipPlan:
    return SipPlan(
        frequency=frequency,
        contribution_amount=Decimal(amount),
        period_years=Decimal(years),
        annual_return_rate_percent=Decimal(rate),
    )


def test_yearly_plan_uses_annuity_due_formula() -> None:
    """FV = P * (((1+i)^n - 1) / i) * (1+i) for yearly contributions."""
    projection = project_sip(
        _plan(ContributionFrequency.YEARLY, "10000", "2", "10")
    )

    assert projection.total_invested == Decimal("20000")
    assert projection.total_value == Decimal("23100")
    assert projection.estimated_returns == Decimal("3100")
    assert projection.invested_percent.quantize(Decimal("0.01")) == Decimal(
        "86.58"
    )


def test_monthly_plan_compounds_per_month() -> None:
    projection = project_sip(
        _plan(ContributionFrequency.MONTHLY, "1000", "1", "12")
    )

    assert projection.total_invested == Decimal("12000")
    assert projection.total_value.quantize(Decimal("0.01")) == Decimal(
        "12809.33"
    )
    assert projection.estimated_returns.quantize(Decimal("0.01")) == Decimal(
        "809.33"
    )


@pytest.mark.parametrize(
    ("amount", "years", "rate"),
    [("0", "10", "12"), ("1000", "0", "12"), ("1000", "10", "0"),
     ("-5", "10", "12"), ("1000", "10", "-1")],
)
def test_non_positive_inputs_yield_zero_projection(amount, years, rate) -> None:
    projection = project_sip(
        _plan(ContributionFrequency.MONTHLY, amount, years, rate)
    )

    assert projection == SipProjection(
        total_invested=Decimal("0"),
        estimated_returns=Decimal("0"),
        total_value=Decimal("0"),
        invested_percent=Decimal("0"),
    )


def test_total_value_is_invested_plus_returns() -> None:
    projection = project_sip(
        _plan(ContributionFrequency.MONTHLY, "2500", "7", "9.5")
    )

    assert projection.total_value == (
        projection.total_invested + projection.estimated_returns
    )
    assert Decimal("0") <= projection.invested_percent <= Decimal("100")


def test_chart_percent_keeps_both_slices_visible() -> None:
    tiny_share = SipProjection(
        total_invested=Decimal("1"),
        estimated_returns=Decimal("9999"),
        total_value=Decimal("10000"),
        invested_percent=Decimal("0.01"),
    )
    full_share = SipProjection(
        total_invested=Decimal("100"),
        estimated_returns=Decimal("0"),
        total_value=Decimal("100"),
        invested_percent=Decimal("100"),
    )

    assert chart_invested_percent(tiny_share) == Decimal("0.5")
    assert chart_invested_percent(full_share) == Decimal("99.5")


def test_chart_percent_is_zero_without_value() -> None:
    empty = project_sip(_plan(ContributionFrequency.YEARLY, "0", "1", "1"))

    assert chart_invested_percent(empty) == Decimal("0")


def test_monthly_plan_reference_scenario() -> None:
    projection = project_sip(
        _plan(ContributionFrequency.MONTHLY, "5000", "5", "12")
    )
    rate = Decimal("0.01")
    expected = Decimal("5000") * (((1 + rate) ** 60 - 1) / rate) * (1 + rate)

    assert projection.total_invested == Decimal("300000")
    assert abs(projection.total_value - expected) < Decimal("0.000001")
    assert projection.total_value.quantize(Decimal("0.01")) == Decimal(
        "412431.83"
    )
    assert projection.estimated_returns == projection.total_value - Decimal(
        "300000"
    )


@pytest.mark.parametrize(
    "frequency", [ContributionFrequency.MONTHLY, ContributionFrequency.YEARLY]
)
@pytest.mark.parametrize("amount", ["1", "500", "25000.75"])
@pytest.mark.parametrize("years", ["0.5", "1", "7", "30"])
@pytest.mark.parametrize("rate", ["0.1", "6", "12.5", "40"])
def test_future_value_never_below_principal(
    frequency, amount, years, rate
) -> None:
    projection = project_sip(_plan(frequency, amount, years, rate))

    assert projection.total_value >= projection.total_invested
    assert projection.estimated_returns >= 0
    assert Decimal("0") <= projection.invested_percent <= Decimal("100")
