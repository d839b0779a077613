"""SQLAlchemy-backed admin audit log.

Each action variant is stored as an ``action_type`` tag plus a JSON payload
holding exactly the fields needed to rebuild it.
"""

import json
from datetime import datetime, timezone

from sqlalchemy import text

from src.application.ports.audit_log import AuditLogPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.models.audit import (
    ActionUndone,
    AdminAction,
    AuditLogEntry,
    FeeSettingsUpdated,
    PromoCodeCreated,
    PromoCodeDeleted,
)
from src.domain.models.promos import PromoCode, PromoType
from src.domain.services.promos import build_bonus_rule
from src.utils.decimal_utils import coerce_decimal, coerce_optional_decimal
from src.utils.time_utils import ensure_utc

ENTRY_COLUMNS = """
    entry_id, admin_name, action_type, payload, created_at,
    is_undone, undone_by, undone_at
"""

INSERT_ENTRY_SQL = text(
    """
    INSERT INTO admin_action_logs (
        admin_name,
        action_type,
        payload,
        created_at,
        is_undone
    )
    VALUES (:admin_name, :action_type, :payload, :created_at, FALSE)
    RETURNING entry_id
    """
)

SELECT_ENTRY_SQL = text(
    f"SELECT {ENTRY_COLUMNS} FROM admin_action_logs WHERE entry_id = :entry_id"
)

MARK_UNDONE_SQL = text(
    """
    UPDATE admin_action_logs
    SET is_undone = TRUE, undone_by = :undone_by, undone_at = :undone_at
    WHERE entry_id = :entry_id
    """
)


def _promo_to_payload(promo: PromoCode) -> dict:
    return {
        "code": promo.code,
        "promo_type": promo.promo_type.value,
        "bonus_type": promo.bonus_rule.bonus_type,
        "bonus_value": str(promo.bonus_rule.value),
        "expires_at": promo.expires_at.isoformat(),
        "description": promo.description,
        "is_active": promo.is_active,
        "total_usage_limit": promo.total_usage_limit,
        "times_used": promo.times_used,
    }


def _promo_from_payload(payload: dict) -> PromoCode:
    return PromoCode(
        code=payload["code"],
        promo_type=PromoType(payload["promo_type"]),
        bonus_rule=build_bonus_rule(
            payload["bonus_type"], coerce_decimal(payload["bonus_value"])
        ),
        expires_at=ensure_utc(datetime.fromisoformat(payload["expires_at"])),
        description=payload.get("description", ""),
        is_active=payload.get("is_active", True),
        total_usage_limit=payload.get("total_usage_limit"),
        times_used=payload.get("times_used", 0),
    )


def serialize_action(action: AdminAction) -> tuple[str, str]:
    """Return the ``(action_type, json_payload)`` pair for an action."""
    if isinstance(action, FeeSettingsUpdated):
        payload = {
            "previous_values": {
                key: None if value is None else str(value)
                for key, value in action.previous_values.items()
            }
        }
    elif isinstance(action, PromoCodeCreated):
        payload = {"code": action.code}
    elif isinstance(action, PromoCodeDeleted):
        payload = {"promo": _promo_to_payload(action.promo)}
    elif isinstance(action, ActionUndone):
        payload = {"undone_entry_id": action.undone_entry_id}
    else:
        raise TypeError(f"Unsupported admin action: {action!r}")
    return type(action).__name__, json.dumps(payload, sort_keys=True)


def deserialize_action(action_type: str, raw_payload: str) -> AdminAction:
    """Rebuild an action from its stored tag and JSON payload.

    Raises:
        ValueError: Unknown action tag.
    """
    payload = json.loads(raw_payload)
    if action_type == FeeSettingsUpdated.__name__:
        return FeeSettingsUpdated(
            previous_values={
                key: coerce_optional_decimal(value)
                for key, value in payload["previous_values"].items()
            }
        )
    if action_type == PromoCodeCreated.__name__:
        return PromoCodeCreated(code=payload["code"])
    if action_type == PromoCodeDeleted.__name__:
        return PromoCodeDeleted(promo=_promo_from_payload(payload["promo"]))
    if action_type == ActionUndone.__name__:
        return ActionUndone(undone_entry_id=int(payload["undone_entry_id"]))
    raise ValueError(f"Unknown admin action type: {action_type}")


def _to_entry(row) -> AuditLogEntry:
    return AuditLogEntry(
        entry_id=row.entry_id,
        admin_name=row.admin_name,
        action=deserialize_action(row.action_type, row.payload),
        created_at=ensure_utc(row.created_at),
        is_undone=bool(row.is_undone),
        undone_by=row.undone_by,
        undone_at=ensure_utc(row.undone_at),
    )


class SqlAlchemyAuditLogRepository(AuditLogPort):
    """Admin actions stored in ``admin_action_logs``."""

    def __init__(self, db_port: DatabaseEnginePort, clock=None) -> None:
        self._db_port = db_port
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def record(self, admin_name: str, action: AdminAction) -> AuditLogEntry:
        action_type, payload = serialize_action(action)
        created_at = self._clock()
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            entry_id = conn.execute(
                INSERT_ENTRY_SQL,
                {
                    "admin_name": admin_name,
                    "action_type": action_type,
                    "payload": payload,
                    "created_at": created_at,
                },
            ).scalar_one()
        return AuditLogEntry(
            entry_id=entry_id,
            admin_name=admin_name,
            action=action,
            created_at=created_at,
        )

    def fetch_entry(self, entry_id: int) -> AuditLogEntry | None:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(SELECT_ENTRY_SQL, {"entry_id": entry_id}).first()
        return _to_entry(row) if row is not None else None

    def list_entries(self, limit: int | None = None) -> list[AuditLogEntry]:
        limit_clause = "LIMIT :limit" if limit is not None else ""
        query = text(
            f"""
            SELECT {ENTRY_COLUMNS}
            FROM admin_action_logs
            ORDER BY created_at DESC, entry_id DESC
            {limit_clause}
            """
        )
        params = {"limit": limit} if limit is not None else {}
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [_to_entry(row) for row in rows]

    def mark_undone(
        self,
        entry_id: int,
        admin_name: str,
        undone_at: datetime,
    ) -> None:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                MARK_UNDONE_SQL,
                {
                    "entry_id": entry_id,
                    "undone_by": admin_name,
                    "undone_at": undone_at,
                },
            )


__all__ = [
    "SqlAlchemyAuditLogRepository",
    "serialize_action",
    "deserialize_action",
]
