"""Port for wallet balances and transaction history."""

from typing import Protocol

from src.domain.models.ledger import (
    LedgerEntry,
    LedgerTransaction,
    WalletBalance,
)


class LedgerStorePort(Protocol):
    """Port exposing per-user balances and their ledger."""

    def fetch_balance(self, user_id: str) -> WalletBalance:
        """Return the user's balances; zero balances for unknown users."""

    def apply_entries(
        self,
        user_id: str,
        entries: list[LedgerEntry],
        redeem_promo_code: str | None = None,
    ) -> WalletBalance:
        """Apply all entries atomically and return the new balances.

        When ``redeem_promo_code`` is given, the promo usage counter is
        incremented in the same transaction, and the whole batch fails with
        ``UsageLimitReachedError`` if the promo has no usage left.
        """

    def fetch_transactions(
        self,
        user_id: str,
        limit: int | None = None,
    ) -> list[LedgerTransaction]:
        """Return the user's transactions, newest first."""


__all__ = ["LedgerStorePort"]
