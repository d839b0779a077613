"""Admin use cases to create and delete promo codes."""

from datetime import datetime
from typing import Callable

from src.application.ports.audit_log import AuditLogPort
from src.application.ports.promo_store import PromoStorePort
from src.application.use_cases.market_utils import utc_now
from src.application.use_cases.validate_promo import parse_promo_type
from src.domain.errors import NotFoundError, ValidationError
from src.domain.models.audit import (
    AuditLogEntry,
    PromoCodeCreated,
    PromoCodeDeleted,
)
from src.domain.models.promos import PromoCode, PromoType
from src.domain.services.normalization import normalize_promo_code
from src.domain.services.promos import build_bonus_rule
from src.domain.services.validation import parse_amount
from src.infrastructure.logging.logger import get_app_logger
from src.utils.time_utils import ensure_utc


def _as_utc(value: datetime) -> datetime:
    if not isinstance(value, datetime):
        raise ValidationError(f"Expiry must be a datetime: {value!r}")
    return ensure_utc(value)


def _parse_usage_limit(value) -> int | None:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValidationError(f"Invalid usage limit: {value!r}")
    try:
        limit = int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid usage limit: {value!r}") from exc
    if limit <= 0:
        raise ValidationError(f"Usage limit must be positive: {limit}")
    return limit


class CreatePromoCodeUseCase:
    """Create a promo code and log the admin action."""

    def __init__(
        self,
        promo_store: PromoStorePort,
        audit_log: AuditLogPort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._promo_store = promo_store
        self._audit_log = audit_log
        self._logger = logger or get_app_logger()
        self._clock = clock or utc_now

    def execute(
        self,
        admin_name: str,
        code: str,
        bonus_type: str,
        bonus_value,
        expires_at: datetime,
        description: str = "",
        promo_type: PromoType | str = PromoType.DEPOSIT_BONUS,
        total_usage_limit=None,
    ) -> AuditLogEntry:
        """Store a new promo code.

        Args:
            admin_name: Admin performing the action.
            code: Promo code; normalized to uppercase.
            bonus_type: ``PERCENTAGE_DEPOSIT`` or ``FLAT_LKR_DEPOSIT``.
            bonus_value: Percentage points or flat LKR amount.
            expires_at: Expiry instant; naive values are read as UTC.
            description: Text shown to users.
            promo_type: Purpose of the code.
            total_usage_limit: Optional maximum number of redemptions.

        Returns:
            AuditLogEntry: The recorded admin action.

        Raises:
            ValidationError: Malformed input, past expiry or duplicate code.
        """
        normalized = normalize_promo_code(code)
        expiry = _as_utc(expires_at)
        if expiry <= self._clock():
            raise ValidationError(f"Expiry must be in the future: {expiry}")
        if self._promo_store.find_promo(normalized) is not None:
            raise ValidationError(f"Promo code already exists: {normalized}")

        promo = PromoCode(
            code=normalized,
            promo_type=parse_promo_type(promo_type),
            bonus_rule=build_bonus_rule(
                bonus_type, parse_amount(bonus_value, "bonus value")
            ),
            expires_at=expiry,
            description=(description or "").strip(),
            total_usage_limit=_parse_usage_limit(total_usage_limit),
        )
        self._promo_store.save_promo(promo)
        entry = self._audit_log.record(
            admin_name, PromoCodeCreated(code=normalized)
        )
        self._logger.info(f"Promo code created by {admin_name}: {normalized}")
        return entry


class DeletePromoCodeUseCase:
    """Delete a promo code, keeping a copy in the audit log for undo."""

    def __init__(
        self,
        promo_store: PromoStorePort,
        audit_log: AuditLogPort,
        logger=None,
    ) -> None:
        self._promo_store = promo_store
        self._audit_log = audit_log
        self._logger = logger or get_app_logger()

    def execute(self, admin_name: str, code: str) -> AuditLogEntry:
        """Delete ``code``.

        Raises:
            NotFoundError: No promo stored under ``code``.
        """
        normalized = normalize_promo_code(code)
        promo = self._promo_store.find_promo(normalized)
        if promo is None:
            raise NotFoundError(normalized)
        self._promo_store.delete_promo(normalized)
        entry = self._audit_log.record(admin_name, PromoCodeDeleted(promo=promo))
        self._logger.info(f"Promo code deleted by {admin_name}: {normalized}")
        return entry


__all__ = ["CreatePromoCodeUseCase", "DeletePromoCodeUseCase"]
