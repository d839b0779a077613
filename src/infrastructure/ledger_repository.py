"""SQLAlchemy-backed wallet balances and transaction ledger."""

from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_store import LedgerStorePort
from src.domain.errors import (
    InsufficientBalanceError,
    UsageLimitReachedError,
)
from src.domain.models.ledger import (
    LedgerEntry,
    LedgerTransaction,
    TransactionKind,
    TransactionStatus,
    WalletBalance,
)
from src.utils.decimal_utils import (
    coerce_decimal,
    coerce_optional_decimal,
    round_lkr,
    round_stored_grams,
)
from src.utils.time_utils import ensure_utc

SELECT_WALLET_SQL = text(
    """
    SELECT user_id, cash_balance_lkr, gold_balance_grams
    FROM wallets
    WHERE user_id = :user_id
    """
)

LOCK_WALLET_SQL = text(
    """
    SELECT user_id, cash_balance_lkr, gold_balance_grams
    FROM wallets
    WHERE user_id = :user_id
    FOR UPDATE
    """
)

CREATE_WALLET_SQL = text(
    """
    INSERT INTO wallets (user_id, cash_balance_lkr, gold_balance_grams)
    VALUES (:user_id, 0, 0)
    ON CONFLICT (user_id) DO NOTHING
    """
)

UPDATE_WALLET_SQL = text(
    """
    UPDATE wallets
    SET cash_balance_lkr = :cash_balance_lkr,
        gold_balance_grams = :gold_balance_grams
    WHERE user_id = :user_id
    """
)

REDEEM_PROMO_SQL = text(
    """
    UPDATE promo_codes
    SET times_used = times_used + 1
    WHERE code = :code
      AND (total_usage_limit IS NULL OR times_used < total_usage_limit)
    """
)

INSERT_TRANSACTION_SQL = text(
    """
    INSERT INTO ledger_transactions (
        user_id,
        kind,
        amount_lkr,
        amount_grams,
        cash_delta_lkr,
        gold_delta_grams,
        price_per_gram_lkr,
        fee_lkr,
        description,
        status,
        created_at
    )
    VALUES (
        :user_id,
        :kind,
        :amount_lkr,
        :amount_grams,
        :cash_delta_lkr,
        :gold_delta_grams,
        :price_per_gram_lkr,
        :fee_lkr,
        :description,
        :status,
        :created_at
    )
    """
)


def _to_balance(user_id: str, row) -> WalletBalance:
    if row is None:
        return WalletBalance(
            user_id=user_id,
            cash_balance_lkr=Decimal("0"),
            gold_balance_grams=Decimal("0"),
        )
    return WalletBalance(
        user_id=row.user_id,
        cash_balance_lkr=coerce_decimal(row.cash_balance_lkr),
        gold_balance_grams=coerce_decimal(row.gold_balance_grams),
    )


def _rounded(entry: LedgerEntry) -> LedgerEntry:
    """Round balance deltas to the precision of the wallet columns."""
    return replace(
        entry,
        cash_delta_lkr=round_lkr(entry.cash_delta_lkr),
        gold_delta_grams=round_stored_grams(entry.gold_delta_grams),
    )


def _to_transaction(row) -> LedgerTransaction:
    return LedgerTransaction(
        transaction_id=row.transaction_id,
        user_id=row.user_id,
        entry=LedgerEntry(
            kind=TransactionKind(row.kind),
            amount_lkr=coerce_decimal(row.amount_lkr),
            cash_delta_lkr=coerce_decimal(row.cash_delta_lkr),
            gold_delta_grams=coerce_decimal(row.gold_delta_grams),
            amount_grams=coerce_optional_decimal(row.amount_grams),
            price_per_gram_lkr=coerce_optional_decimal(row.price_per_gram_lkr),
            fee_lkr=coerce_optional_decimal(row.fee_lkr),
            description=row.description or "",
            status=TransactionStatus(row.status),
        ),
        created_at=ensure_utc(row.created_at),
    )


class SqlAlchemyLedgerRepository(LedgerStorePort):
    """Wallets and transactions stored in ``wallets`` and
    ``ledger_transactions``.

    All entries of one call are written in a single database transaction
    with the wallet row locked, so balances never go negative.
    """

    def __init__(self, db_port: DatabaseEnginePort, clock=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the platform engine.
            clock: Optional callable returning the current aware datetime.
        """
        self._db_port = db_port
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def fetch_balance(self, user_id: str) -> WalletBalance:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(SELECT_WALLET_SQL, {"user_id": user_id}).first()
        return _to_balance(user_id, row)

    def apply_entries(
        self,
        user_id: str,
        entries: list[LedgerEntry],
        redeem_promo_code: str | None = None,
    ) -> WalletBalance:
        """Apply ``entries`` atomically.

        Cash deltas are rounded to cents and gold deltas to the gold column
        precision, so the returned balance equals the stored one.

        Args:
            user_id: Wallet owner.
            entries: Balance changes to write.
            redeem_promo_code: Promo whose usage counter is incremented in
                the same transaction.

        Raises:
            InsufficientBalanceError: When the entries would overdraw the
                cash or gold balance; nothing is written.
            UsageLimitReachedError: When the promo has no usage left;
                nothing is written.
        """
        entries = [_rounded(entry) for entry in entries]
        created_at = self._clock()
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(CREATE_WALLET_SQL, {"user_id": user_id})
            current = _to_balance(
                user_id,
                conn.execute(LOCK_WALLET_SQL, {"user_id": user_id}).first(),
            )
            cash = current.cash_balance_lkr + sum(
                (entry.cash_delta_lkr for entry in entries), Decimal("0")
            )
            gold = current.gold_balance_grams + sum(
                (entry.gold_delta_grams for entry in entries), Decimal("0")
            )
            if cash < 0 or gold < 0:
                raise InsufficientBalanceError(
                    f"Ledger entries would overdraw wallet {user_id}"
                )
            if redeem_promo_code is not None:
                redeemed = conn.execute(
                    REDEEM_PROMO_SQL, {"code": redeem_promo_code}
                )
                if redeemed.rowcount != 1:
                    raise UsageLimitReachedError(redeem_promo_code)
            conn.execute(
                UPDATE_WALLET_SQL,
                {
                    "user_id": user_id,
                    "cash_balance_lkr": cash,
                    "gold_balance_grams": gold,
                },
            )
            if entries:
                conn.execute(
                    INSERT_TRANSACTION_SQL,
                    [
                        {
                            "user_id": user_id,
                            "kind": entry.kind.value,
                            "amount_lkr": entry.amount_lkr,
                            "amount_grams": entry.amount_grams,
                            "cash_delta_lkr": entry.cash_delta_lkr,
                            "gold_delta_grams": entry.gold_delta_grams,
                            "price_per_gram_lkr": entry.price_per_gram_lkr,
                            "fee_lkr": entry.fee_lkr,
                            "description": entry.description,
                            "status": entry.status.value,
                            "created_at": created_at,
                        }
                        for entry in entries
                    ],
                )
        return WalletBalance(
            user_id=user_id,
            cash_balance_lkr=cash,
            gold_balance_grams=gold,
        )

    def fetch_transactions(
        self,
        user_id: str,
        limit: int | None = None,
    ) -> list[LedgerTransaction]:
        limit_clause = "LIMIT :limit" if limit is not None else ""
        query = text(
            f"""
            SELECT transaction_id, user_id, kind, amount_lkr, amount_grams,
                   cash_delta_lkr, gold_delta_grams, price_per_gram_lkr,
                   fee_lkr, description, status, created_at
            FROM ledger_transactions
            WHERE user_id = :user_id
            ORDER BY created_at DESC, transaction_id DESC
            {limit_clause}
            """
        )
        params = {"user_id": user_id}
        if limit is not None:
            params["limit"] = limit
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [_to_transaction(row) for row in rows]


__all__ = ["SqlAlchemyLedgerRepository"]
