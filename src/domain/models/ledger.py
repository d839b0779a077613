"""Domain models for wallet balances and ledger entries."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class TransactionKind(str, Enum):
    """Kinds of balance-changing records."""

    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    INVESTMENT = "investment"
    SELL_GOLD = "sell_gold"
    REDEMPTION = "redemption"
    BONUS = "bonus"
    FEE = "fee"


class TransactionStatus(str, Enum):
    COMPLETED = "completed"
    PENDING = "pending"
    PROCESSING = "processing"


@dataclass(frozen=True)
class LedgerEntry:
    """Balance change to apply to a wallet.

    Attributes:
        kind: Transaction kind.
        amount_lkr: LKR amount shown in the history.
        cash_delta_lkr: Signed change to the cash balance.
        gold_delta_grams: Signed change to the gold balance.
        amount_grams: Gram amount shown in the history.
        price_per_gram_lkr: Price used for the conversion, if any.
        fee_lkr: Fee charged by the platform, if any.
        description: Text shown to the user.
        status: Processing status.
    """

    kind: TransactionKind
    amount_lkr: Decimal
    cash_delta_lkr: Decimal = Decimal("0")
    gold_delta_grams: Decimal = Decimal("0")
    amount_grams: Decimal | None = None
    price_per_gram_lkr: Decimal | None = None
    fee_lkr: Decimal | None = None
    description: str = ""
    status: TransactionStatus = TransactionStatus.COMPLETED


@dataclass(frozen=True)
class LedgerTransaction:
    """Persisted ledger entry."""

    transaction_id: int
    user_id: str
    entry: LedgerEntry
    created_at: datetime


@dataclass(frozen=True)
class WalletBalance:
    """Current cash and gold balances of a user."""

    user_id: str
    cash_balance_lkr: Decimal
    gold_balance_grams: Decimal


__all__ = [
    "TransactionKind",
    "TransactionStatus",
    "LedgerEntry",
    "LedgerTransaction",
    "WalletBalance",
]
