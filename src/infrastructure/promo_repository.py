"""SQLAlchemy-backed repository for promo codes."""

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.promo_store import PromoStorePort
from src.domain.models.promos import PromoCode, PromoType
from src.domain.services.promos import build_bonus_rule
from src.utils.decimal_utils import coerce_decimal
from src.utils.time_utils import ensure_utc

PROMO_COLUMNS = """
    code, promo_type, bonus_type, bonus_value, expires_at, description,
    is_active, total_usage_limit, times_used
"""

SELECT_PROMO_SQL = text(
    f"SELECT {PROMO_COLUMNS} FROM promo_codes WHERE code = :code"
)

SELECT_PROMOS_SQL = text(
    f"SELECT {PROMO_COLUMNS} FROM promo_codes ORDER BY code"
)

INSERT_PROMO_SQL = text(
    """
    INSERT INTO promo_codes (
        code,
        promo_type,
        bonus_type,
        bonus_value,
        expires_at,
        description,
        is_active,
        total_usage_limit,
        times_used
    )
    VALUES (
        :code,
        :promo_type,
        :bonus_type,
        :bonus_value,
        :expires_at,
        :description,
        :is_active,
        :total_usage_limit,
        :times_used
    )
    """
)

DELETE_PROMO_SQL = text("DELETE FROM promo_codes WHERE code = :code")


def _to_promo(row) -> PromoCode:
    """Map a row to a PromoCode.

    Raises:
        ValidationError: Unknown stored bonus type.
    """
    return PromoCode(
        code=row.code,
        promo_type=PromoType(row.promo_type),
        bonus_rule=build_bonus_rule(
            row.bonus_type, coerce_decimal(row.bonus_value)
        ),
        expires_at=ensure_utc(row.expires_at),
        description=row.description or "",
        is_active=bool(row.is_active),
        total_usage_limit=row.total_usage_limit,
        times_used=row.times_used or 0,
    )


class SqlAlchemyPromoRepository(PromoStorePort):
    """Promo codes stored in the ``promo_codes`` table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def find_promo(self, code: str) -> PromoCode | None:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(SELECT_PROMO_SQL, {"code": code}).first()
        return _to_promo(row) if row is not None else None

    def list_promos(self) -> list[PromoCode]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_PROMOS_SQL).all()
        return [_to_promo(row) for row in rows]

    def save_promo(self, promo: PromoCode) -> None:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                INSERT_PROMO_SQL,
                {
                    "code": promo.code,
                    "promo_type": promo.promo_type.value,
                    "bonus_type": promo.bonus_rule.bonus_type,
                    "bonus_value": promo.bonus_rule.value,
                    "expires_at": promo.expires_at,
                    "description": promo.description,
                    "is_active": promo.is_active,
                    "total_usage_limit": promo.total_usage_limit,
                    "times_used": promo.times_used,
                },
            )

    def delete_promo(self, code: str) -> bool:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(DELETE_PROMO_SQL, {"code": code})
        return result.rowcount > 0


__all__ = ["SqlAlchemyPromoRepository"]
