"""Systematic investment plan (SIP) projection."""

from decimal import Decimal

from src.domain.constants import CHART_MIN_VISIBLE_PERCENT
from src.domain.models.projections import (
    ContributionFrequency,
    SipPlan,
    SipProjection,
)

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def _zero_projection() -> SipProjection:
    return SipProjection(
        total_invested=_ZERO,
        estimated_returns=_ZERO,
        total_value=_ZERO,
        invested_percent=_ZERO,
    )


def _periods_and_rate(plan: SipPlan) -> tuple[Decimal, Decimal]:
    annual_rate = plan.annual_return_rate_percent / _HUNDRED
    if plan.frequency == ContributionFrequency.MONTHLY:
        return plan.period_years * 12, annual_rate / 12
    return plan.period_years, annual_rate


def project_sip(plan: SipPlan) -> SipProjection:
    """Project the future value of a recurring contribution plan.

    Contributions compound as an annuity-due: each contribution earns
    interest from the start of its period.

    Args:
        plan: Contribution plan from the calculator.

    Returns:
        SipProjection: Principal, returns, total value and invested share.
        All fields are zero when amount, period or rate is not positive.
    """
    if (
        plan.contribution_amount <= 0
        or plan.period_years <= 0
        or plan.annual_return_rate_percent <= 0
    ):
        return _zero_projection()

    periods, rate = _periods_and_rate(plan)
    principal = plan.contribution_amount * periods
    if rate == 0:
        future_value = principal
    else:
        growth = (1 + rate) ** periods
        future_value = (
            plan.contribution_amount * ((growth - 1) / rate) * (1 + rate)
        )

    estimated_returns = max(_ZERO, future_value - principal)
    invested_percent = _ZERO
    if future_value > 0:
        invested_percent = min(
            _HUNDRED, max(_ZERO, principal / future_value * _HUNDRED)
        )
    return SipProjection(
        total_invested=principal,
        estimated_returns=estimated_returns,
        total_value=future_value,
        invested_percent=invested_percent,
    )


def chart_invested_percent(projection: SipProjection) -> Decimal:
    """Return the invested share used to draw the donut chart.

    The share is kept a visible margin away from 0 and 100 so both slices
    render. This is a display rule only.
    """
    if projection.total_value <= 0:
        return _ZERO
    return min(
        _HUNDRED - CHART_MIN_VISIBLE_PERCENT,
        max(CHART_MIN_VISIBLE_PERCENT, projection.invested_percent),
    )


__all__ = ["project_sip", "chart_invested_percent"]
