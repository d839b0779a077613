"""SQLAlchemy-backed repository for the daily gold price history."""

from datetime import date

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.price_source import PriceSourcePort
from src.domain.models.pricing import PriceRecord
from src.utils.decimal_utils import coerce_decimal

SELECT_LATEST_PRICE_SQL = text(
    """
    SELECT price_date, price_per_troy_ounce_lkr
    FROM gold_prices
    ORDER BY price_date DESC
    LIMIT 1
    """
)

INSERT_PRICE_SQL = text(
    """
    INSERT INTO gold_prices (price_date, price_per_troy_ounce_lkr)
    VALUES (:price_date, :price_per_troy_ounce_lkr)
    ON CONFLICT (price_date) DO NOTHING
    """
)


def _to_record(row) -> PriceRecord:
    return PriceRecord(
        price_date=row.price_date,
        price_per_troy_ounce_lkr=coerce_decimal(row.price_per_troy_ounce_lkr),
    )


class SqlAlchemyPriceRepository(PriceSourcePort):
    """Price history stored in the ``gold_prices`` table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the platform engine.
        """
        self._db_port = db_port

    def fetch_latest_price(self) -> PriceRecord | None:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(SELECT_LATEST_PRICE_SQL).first()
        return _to_record(row) if row is not None else None

    def fetch_price_history(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[PriceRecord]:
        """Return price records between the optional bounds, ascending.

        Args:
            start_date: Inclusive lower bound.
            end_date: Inclusive upper bound.

        Returns:
            list[PriceRecord]: Records ordered by date.
        """
        clauses = []
        params = {}
        if start_date is not None:
            clauses.append("price_date >= :start_date")
            params["start_date"] = start_date
        if end_date is not None:
            clauses.append("price_date <= :end_date")
            params["end_date"] = end_date
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        query = text(
            f"""
            SELECT price_date, price_per_troy_ounce_lkr
            FROM gold_prices
            {where}
            ORDER BY price_date
            """
        )
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [_to_record(row) for row in rows]

    def append_price(self, record: PriceRecord) -> bool:
        """Insert ``record`` unless its date is already stored."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                INSERT_PRICE_SQL,
                {
                    "price_date": record.price_date,
                    "price_per_troy_ounce_lkr": record.price_per_troy_ounce_lkr,
                },
            )
        return result.rowcount == 1


__all__ = ["SqlAlchemyPriceRepository"]
