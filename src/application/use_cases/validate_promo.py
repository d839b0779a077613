"""Use case to validate a promo code for a given purpose."""

from datetime import datetime
from typing import Callable

from src.application.ports.promo_store import PromoStorePort
from src.application.use_cases.market_utils import utc_now
from src.domain.errors import (
    NotFoundError,
    PromoRejectedError,
    ValidationError,
)
from src.domain.models.promos import PromoDetails, PromoType
from src.domain.services.normalization import normalize_promo_code
from src.domain.services.promos import validate_promo
from src.infrastructure.logging.logger import get_usage_logger


def parse_promo_type(value) -> PromoType:
    """Parse a promo purpose such as ``DEPOSIT_BONUS``."""
    try:
        return PromoType(str(getattr(value, "value", value)).strip().upper())
    except ValueError as exc:
        raise ValidationError(f"Unsupported promo type: {value!r}") from exc


class ValidatePromoUseCase:
    """Look up a promo code and check that it can be applied now."""

    def __init__(
        self,
        promo_store: PromoStorePort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            promo_store: Port providing promo codes.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning the current aware datetime.
        """
        self._promo_store = promo_store
        self._logger = logger or get_usage_logger()
        self._clock = clock or utc_now

    def execute(
        self,
        code: str,
        promo_type: PromoType | str = PromoType.DEPOSIT_BONUS,
    ) -> PromoDetails:
        """Return the promo terms when ``code`` is valid.

        Raises:
            ValidationError: Empty code.
            NotFoundError: Malformed or unknown code, inactive, or wrong
                purpose.
            ExpiredError: Expiry instant reached.
            UsageLimitReachedError: Usage limit consumed.
        """
        normalized = self._normalize(code)
        promo = self._promo_store.find_promo(normalized)
        try:
            details = validate_promo(
                normalized,
                promo,
                parse_promo_type(promo_type),
                self._clock(),
            )
        except PromoRejectedError as exc:
            self._logger.info(f"Promo code rejected: {normalized} ({exc})")
            raise
        return details

    def _normalize(self, code: str) -> str:
        try:
            return normalize_promo_code(code)
        except ValidationError as exc:
            if not (code or "").strip():
                raise
            # A code with inner whitespace can never be stored.
            self._logger.info(f"Promo code rejected: {code!r} ({exc})")
            raise NotFoundError(code.strip().upper()) from exc


__all__ = ["ValidatePromoUseCase", "parse_promo_type"]
