"""SQLAlchemy-backed key/value platform settings."""

from collections.abc import Iterable, Mapping
from decimal import Decimal, InvalidOperation

from sqlalchemy import bindparam, text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.settings_store import SettingsStorePort

SELECT_SETTINGS_SQL = text(
    """
    SELECT setting_key, setting_value
    FROM platform_settings
    WHERE setting_key IN :keys
    """
).bindparams(bindparam("keys", expanding=True))

UPSERT_SETTING_SQL = text(
    """
    INSERT INTO platform_settings (setting_key, setting_value)
    VALUES (:setting_key, :setting_value)
    ON CONFLICT (setting_key) DO UPDATE
    SET setting_value = EXCLUDED.setting_value
    """
)

DELETE_SETTING_SQL = text(
    "DELETE FROM platform_settings WHERE setting_key = :setting_key"
)


def _parse_value(raw) -> Decimal | None:
    """Return the numeric setting value; non-numeric text maps to None."""
    if raw is None:
        return None
    try:
        value = Decimal(str(raw).strip())
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


class SqlAlchemySettingsRepository(SettingsStorePort):
    """Settings stored as text in ``platform_settings``."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def fetch_settings(self, keys: Iterable[str]) -> dict[str, Decimal | None]:
        requested = list(keys)
        values: dict[str, Decimal | None] = {key: None for key in requested}
        if not requested:
            return values
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_SETTINGS_SQL, {"keys": requested}).all()
        for row in rows:
            values[row.setting_key] = _parse_value(row.setting_value)
        return values

    def save_settings(self, values: Mapping[str, Decimal | None]) -> None:
        """Upsert all values in one transaction; None deletes the key."""
        upserts = [
            {"setting_key": key, "setting_value": str(value)}
            for key, value in values.items()
            if value is not None
        ]
        deletes = [
            {"setting_key": key}
            for key, value in values.items()
            if value is None
        ]
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            if upserts:
                conn.execute(UPSERT_SETTING_SQL, upserts)
            if deletes:
                conn.execute(DELETE_SETTING_SQL, deletes)


__all__ = ["SqlAlchemySettingsRepository"]
