"""Domain models for the SIP calculator."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class ContributionFrequency(str, Enum):
    """How often a contribution is made."""

    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass(frozen=True)
class SipPlan:
    """Recurring contribution plan entered in the calculator.

    Attributes:
        frequency: Contribution frequency.
        contribution_amount: Amount contributed each period.
        period_years: Duration of the plan in years.
        annual_return_rate_percent: Expected annual return, in percent.
    """

    frequency: ContributionFrequency
    contribution_amount: Decimal
    period_years: Decimal
    annual_return_rate_percent: Decimal


@dataclass(frozen=True)
class SipProjection:
    """Projected outcome of a SIP plan."""

    total_invested: Decimal
    estimated_returns: Decimal
    total_value: Decimal
    invested_percent: Decimal


__all__ = ["ContributionFrequency", "SipPlan", "SipProjection"]
