"""Use case to project a systematic investment plan."""

from src.domain.errors import ValidationError
from src.domain.models.projections import (
    ContributionFrequency,
    SipPlan,
    SipProjection,
)
from src.domain.services.sip import project_sip
from src.domain.services.validation import parse_amount
from src.infrastructure.logging.logger import get_usage_logger


def parse_frequency(value) -> ContributionFrequency:
    """Parse ``monthly`` or ``yearly`` (case-insensitive)."""
    if isinstance(value, ContributionFrequency):
        return value
    try:
        return ContributionFrequency(str(value).strip().lower())
    except ValueError as exc:
        raise ValidationError(f"Unsupported frequency: {value!r}") from exc


class ProjectSipUseCase:
    """Compute the SIP calculator outputs from raw inputs."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_usage_logger()

    def execute(
        self,
        frequency,
        contribution_amount,
        period_years,
        annual_return_rate_percent,
    ) -> SipProjection:
        """Return the projection for the calculator inputs.

        Args:
            frequency: ``monthly`` or ``yearly``.
            contribution_amount: Amount contributed each period.
            period_years: Plan duration in years.
            annual_return_rate_percent: Expected annual return in percent.

        Returns:
            SipProjection: Projected totals; zeros for non-positive inputs.

        Raises:
            ValidationError: Non-numeric input or unknown frequency.
        """
        plan = SipPlan(
            frequency=parse_frequency(frequency),
            contribution_amount=parse_amount(
                contribution_amount, "contribution amount"
            ),
            period_years=parse_amount(period_years, "investment period"),
            annual_return_rate_percent=parse_amount(
                annual_return_rate_percent, "return rate"
            ),
        )
        projection = project_sip(plan)
        self._logger.debug(
            f"SIP projected: frequency={plan.frequency.value}, "
            f"total_value={projection.total_value}"
        )
        return projection


__all__ = ["ProjectSipUseCase", "parse_frequency"]
