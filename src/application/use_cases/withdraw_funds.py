"""Use case to request a cash withdrawal from a wallet."""

from src.application.ports.ledger_store import LedgerStorePort
from src.domain.errors import InsufficientBalanceError, ValidationError
from src.domain.models.ledger import (
    LedgerEntry,
    TransactionKind,
    TransactionStatus,
    WalletBalance,
)
from src.domain.services.validation import parse_amount, require_positive
from src.infrastructure.logging.logger import get_usage_logger
from src.utils.decimal_utils import round_lkr


class WithdrawFundsUseCase:
    """Debit the cash wallet and record a pending withdrawal."""

    def __init__(self, ledger_store: LedgerStorePort, logger=None) -> None:
        self._ledger_store = ledger_store
        self._logger = logger or get_usage_logger()

    def execute(
        self,
        user_id: str,
        amount_lkr,
        bank_account: str | None,
    ) -> WalletBalance:
        """Withdraw ``amount_lkr`` to ``bank_account``.

        Raises:
            ValidationError: Non-positive amount or missing bank account.
            InsufficientBalanceError: Cash balance below the amount.
        """
        amount = parse_amount(amount_lkr, "withdrawal amount")
        require_positive(amount, "withdrawal amount")
        if not bank_account or not bank_account.strip():
            raise ValidationError("Bank account is required for withdrawals")

        balance = self._ledger_store.fetch_balance(user_id)
        if balance.cash_balance_lkr < amount:
            raise InsufficientBalanceError(
                f"Insufficient wallet balance: {balance.cash_balance_lkr} "
                f"< {amount}"
            )
        entry = LedgerEntry(
            kind=TransactionKind.WITHDRAWAL,
            amount_lkr=amount,
            cash_delta_lkr=-amount,
            description=(
                f"Withdrawal request for {round_lkr(amount)} LKR "
                f"to account {bank_account.strip()}"
            ),
            status=TransactionStatus.PENDING,
        )
        updated = self._ledger_store.apply_entries(user_id, [entry])
        self._logger.info(f"Withdrawal requested: user={user_id}, amount={amount}")
        return updated


__all__ = ["WithdrawFundsUseCase"]
