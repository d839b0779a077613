"""Tests for admin promo, fee settings and undo use cases."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.admin_promos import (
    CreatePromoCodeUseCase,
    DeletePromoCodeUseCase,
)
from src.application.use_cases.undo_admin_action import (
    UndoAdminActionUseCase,
)
from src.application.use_cases.update_fee_settings import (
    UpdateFeeSettingsUseCase,
)
from src.domain.errors import (
    ActionNotUndoableError,
    NotFoundError,
    ValidationError,
)
from src.domain.models.audit import (
    ActionUndone,
    AuditLogEntry,
    FeeSettingsUpdated,
    PromoCodeCreated,
    PromoCodeDeleted,
)
from src.domain.models.promos import (
    FlatLkrDepositBonus,
    PromoCode,
    PromoType,
)

NOW = datetime(2024, 6, 1, tzinfo=timezone.utc)


def _promo() -> PromoCode:
    return PromoCode(
        code="FLAT500",
        promo_type=PromoType.DEPOSIT_BONUS,
        bonus_rule=FlatLkrDepositBonus(Decimal("500")),
        expires_at=NOW + timedelta(days=10),
    )


def _audit_log(entry: AuditLogEntry | None = None) -> MagicMock:
    audit_log = MagicMock()
    audit_log.fetch_entry.return_value = entry
    audit_log.record.side_effect = lambda admin, action: AuditLogEntry(
        entry_id=99, admin_name=admin, action=action, created_at=NOW
    )
    return audit_log


def test_create_promo_stores_normalized_code_and_logs() -> None:
    store = MagicMock()
    store.find_promo.return_value = None
    audit_log = _audit_log()
    use_case = CreatePromoCodeUseCase(
        store, audit_log, logger=MagicMock(), clock=lambda: NOW
    )

    entry = use_case.execute(
        "admin",
        "flat500",
        "flat_lkr_deposit",
        "500",
        datetime(2024, 7, 1),
        total_usage_limit="100",
    )

    saved = store.save_promo.call_args.args[0]
    assert saved.code == "FLAT500"
    assert saved.bonus_rule == FlatLkrDepositBonus(Decimal("500"))
    assert saved.expires_at.tzinfo is timezone.utc
    assert saved.total_usage_limit == 100
    assert entry.action == PromoCodeCreated(code="FLAT500")


def test_create_promo_rejects_duplicate_and_past_expiry() -> None:
    store = MagicMock()
    store.find_promo.return_value = _promo()
    use_case = CreatePromoCodeUseCase(
        store, _audit_log(), logger=MagicMock(), clock=lambda: NOW
    )

    with pytest.raises(ValidationError):
        use_case.execute("admin", "FLAT500", "FLAT_LKR_DEPOSIT", 5, NOW)
    with pytest.raises(ValidationError):
        use_case.execute(
            "admin", "FLAT500", "FLAT_LKR_DEPOSIT", 5, NOW + timedelta(days=1)
        )
    store.save_promo.assert_not_called()


def test_delete_promo_keeps_copy_for_undo() -> None:
    store = MagicMock()
    store.find_promo.return_value = _promo()
    audit_log = _audit_log()
    use_case = DeletePromoCodeUseCase(store, audit_log, logger=MagicMock())

    entry = use_case.execute("admin", "flat500")

    store.delete_promo.assert_called_once_with("FLAT500")
    assert entry.action == PromoCodeDeleted(promo=_promo())


def test_delete_missing_promo_fails() -> None:
    store = MagicMock()
    store.find_promo.return_value = None
    use_case = DeletePromoCodeUseCase(store, _audit_log(), logger=MagicMock())

    with pytest.raises(NotFoundError):
        use_case.execute("admin", "NOPE")


def test_update_fee_settings_records_previous_values() -> None:
    settings = MagicMock()
    settings.fetch_settings.return_value = {"BUY_FEE_PERCENT": None}
    use_case = UpdateFeeSettingsUseCase(
        settings, _audit_log(), logger=MagicMock()
    )

    entry = use_case.execute("admin", {"BUY_FEE_PERCENT": "0.015"})

    settings.save_settings.assert_called_once_with(
        {"BUY_FEE_PERCENT": Decimal("0.015")}
    )
    assert entry.action == FeeSettingsUpdated(
        previous_values={"BUY_FEE_PERCENT": None}
    )


@pytest.mark.parametrize(
    "values",
    [{}, {"UNKNOWN": 1}, {"SELL_FEE_PERCENT": "1.5"},
     {"REDEMPTION_DELIVERY_LKR": "-10"}],
)
def test_update_fee_settings_rejects_invalid_values(values) -> None:
    settings = MagicMock()
    use_case = UpdateFeeSettingsUseCase(
        settings, _audit_log(), logger=MagicMock()
    )

    with pytest.raises(ValidationError):
        use_case.execute("admin", values)
    settings.save_settings.assert_not_called()


def _entry(action, is_undone: bool = False) -> AuditLogEntry:
    return AuditLogEntry(
        entry_id=7,
        admin_name="admin",
        action=action,
        created_at=NOW,
        is_undone=is_undone,
    )


def _undo_use_case(entry, promo_store=None, settings_store=None):
    audit_log = _audit_log(entry)
    promo_store = promo_store or MagicMock()
    settings_store = settings_store or MagicMock()
    use_case = UndoAdminActionUseCase(
        audit_log,
        promo_store,
        settings_store,
        logger=MagicMock(),
        clock=lambda: NOW,
    )
    return use_case, audit_log, promo_store, settings_store


def test_undo_settings_restores_previous_values() -> None:
    previous = {"BUY_FEE_PERCENT": Decimal("0.01"), "SELL_FEE_PERCENT": None}
    use_case, audit_log, _, settings_store = _undo_use_case(
        _entry(FeeSettingsUpdated(previous_values=previous))
    )

    undo_entry = use_case.execute("root", 7)

    settings_store.save_settings.assert_called_once_with(previous)
    audit_log.mark_undone.assert_called_once_with(7, "root", NOW)
    assert undo_entry.action == ActionUndone(undone_entry_id=7)


def test_undo_create_deletes_promo() -> None:
    use_case, _, promo_store, _ = _undo_use_case(
        _entry(PromoCodeCreated(code="FLAT500"))
    )

    use_case.execute("root", 7)

    promo_store.delete_promo.assert_called_once_with("FLAT500")


def test_undo_delete_restores_promo() -> None:
    promo_store = MagicMock()
    promo_store.find_promo.return_value = None
    use_case, _, _, _ = _undo_use_case(
        _entry(PromoCodeDeleted(promo=_promo())), promo_store=promo_store
    )

    use_case.execute("root", 7)

    promo_store.save_promo.assert_called_once_with(_promo())


@pytest.mark.parametrize(
    "entry",
    [
        None,
        _entry(PromoCodeCreated(code="FLAT500"), is_undone=True),
        _entry(ActionUndone(undone_entry_id=3)),
    ],
)
def test_undo_rejects_missing_done_or_irreversible(entry) -> None:
    use_case, audit_log, _, _ = _undo_use_case(entry)

    with pytest.raises(ActionNotUndoableError):
        use_case.execute("root", 7)
    audit_log.mark_undone.assert_not_called()
