"""Admin use case to revert a logged action."""

from datetime import datetime
from typing import Callable

from src.application.ports.audit_log import AuditLogPort
from src.application.ports.promo_store import PromoStorePort
from src.application.ports.settings_store import SettingsStorePort
from src.application.use_cases.market_utils import utc_now
from src.domain.errors import ActionNotUndoableError
from src.domain.models.audit import (
    ActionUndone,
    AuditLogEntry,
    FeeSettingsUpdated,
    PromoCodeCreated,
    PromoCodeDeleted,
)
from src.infrastructure.logging.logger import get_app_logger


class UndoAdminActionUseCase:
    """Revert a reversible admin action and log the reversal.

    Each reversible action type maps to exactly one reverting handler.
    """

    def __init__(
        self,
        audit_log: AuditLogPort,
        promo_store: PromoStorePort,
        settings_store: SettingsStorePort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._audit_log = audit_log
        self._promo_store = promo_store
        self._settings_store = settings_store
        self._logger = logger or get_app_logger()
        self._clock = clock or utc_now
        self._handlers = {
            FeeSettingsUpdated: self._restore_settings,
            PromoCodeCreated: self._remove_created_promo,
            PromoCodeDeleted: self._restore_deleted_promo,
        }

    def execute(self, admin_name: str, entry_id: int) -> AuditLogEntry:
        """Undo entry ``entry_id``.

        Returns:
            AuditLogEntry: The recorded undo entry.

        Raises:
            ActionNotUndoableError: Missing, already undone or irreversible.
        """
        entry = self._audit_log.fetch_entry(entry_id)
        if entry is None:
            raise ActionNotUndoableError(f"Admin action not found: {entry_id}")
        if entry.is_undone:
            raise ActionNotUndoableError(
                f"Admin action already undone: {entry_id}"
            )
        handler = self._handlers.get(type(entry.action))
        if handler is None:
            raise ActionNotUndoableError(
                f"Admin action cannot be undone: {entry.action.label}"
            )

        handler(entry.action)
        self._audit_log.mark_undone(entry_id, admin_name, self._clock())
        undo_entry = self._audit_log.record(
            admin_name, ActionUndone(undone_entry_id=entry_id)
        )
        self._logger.info(
            f"Admin action {entry_id} ({entry.action.label}) undone "
            f"by {admin_name}"
        )
        return undo_entry

    def _restore_settings(self, action: FeeSettingsUpdated) -> None:
        self._settings_store.save_settings(dict(action.previous_values))

    def _remove_created_promo(self, action: PromoCodeCreated) -> None:
        self._promo_store.delete_promo(action.code)

    def _restore_deleted_promo(self, action: PromoCodeDeleted) -> None:
        if self._promo_store.find_promo(action.promo.code) is not None:
            raise ActionNotUndoableError(
                f"Promo code already exists: {action.promo.code}"
            )
        self._promo_store.save_promo(action.promo)


__all__ = ["UndoAdminActionUseCase"]
