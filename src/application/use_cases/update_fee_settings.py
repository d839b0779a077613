"""Admin use case to change platform fees."""

from collections.abc import Mapping
from decimal import Decimal

from src.application.ports.audit_log import AuditLogPort
from src.application.ports.settings_store import SettingsStorePort
from src.domain.errors import ValidationError
from src.domain.models.audit import AuditLogEntry, FeeSettingsUpdated
from src.domain.services.trades import (
    BUY_FEE_SETTING,
    FEE_SETTING_KEYS,
    SELL_FEE_SETTING,
)
from src.domain.services.validation import parse_amount
from src.infrastructure.logging.logger import get_app_logger

_RATE_KEYS = (BUY_FEE_SETTING, SELL_FEE_SETTING)


def _validate_value(key: str, raw) -> Decimal | None:
    if raw is None:
        return None
    value = parse_amount(raw, key)
    if value < 0:
        raise ValidationError(f"{key} must not be negative: {value}")
    if key in _RATE_KEYS and value > 1:
        raise ValidationError(f"{key} must be a fraction between 0 and 1")
    return value


class UpdateFeeSettingsUseCase:
    """Store fee overrides and log the previous values for undo."""

    def __init__(
        self,
        settings_store: SettingsStorePort,
        audit_log: AuditLogPort,
        logger=None,
    ) -> None:
        self._settings_store = settings_store
        self._audit_log = audit_log
        self._logger = logger or get_app_logger()

    def execute(
        self,
        admin_name: str,
        values: Mapping[str, object],
    ) -> AuditLogEntry:
        """Apply ``values``; a None value restores the default.

        Raises:
            ValidationError: Unknown key, empty update or invalid value.
        """
        if not values:
            raise ValidationError("No settings to update")
        unknown = sorted(set(values) - set(FEE_SETTING_KEYS))
        if unknown:
            raise ValidationError(f"Unknown settings: {', '.join(unknown)}")

        validated = {key: _validate_value(key, raw) for key, raw in values.items()}
        previous = self._settings_store.fetch_settings(list(validated))
        self._settings_store.save_settings(validated)
        entry = self._audit_log.record(
            admin_name,
            FeeSettingsUpdated(previous_values=dict(previous)),
        )
        self._logger.info(
            f"Fee settings updated by {admin_name}: {sorted(validated)}"
        )
        return entry


__all__ = ["UpdateFeeSettingsUseCase"]
