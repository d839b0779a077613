"""Use case to credit a deposit, plus any promo bonus, to a wallet."""

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from typing import Callable

from src.application.ports.ledger_store import LedgerStorePort
from src.application.ports.promo_store import PromoStorePort
from src.application.use_cases.validate_promo import ValidatePromoUseCase
from src.domain.constants import MAXIMUM_DEPOSIT_LKR, MINIMUM_DEPOSIT_LKR
from src.domain.errors import PromoRejectedError, UsageLimitReachedError
from src.domain.models.ledger import LedgerEntry, TransactionKind, WalletBalance
from src.domain.models.promos import PromoDetails, PromoType
from src.domain.models.quotes import DepositQuote
from src.domain.services.deposits import quote_deposit
from src.domain.services.validation import parse_amount
from src.infrastructure.logging.logger import get_usage_logger
from src.utils.decimal_utils import round_lkr


@dataclass(frozen=True)
class DepositResult:
    """Outcome of a deposit.

    Attributes:
        quote: Amount, bonus and total credited.
        balance: Wallet balances after the deposit.
        promo_error: Why a promo was dropped, when it was not applied.
    """

    quote: DepositQuote
    balance: WalletBalance
    promo_error: str | None = None


class DepositFundsUseCase:
    """Validate a deposit, apply its promo bonus and credit the wallet."""

    def __init__(
        self,
        ledger_store: LedgerStorePort,
        promo_store: PromoStorePort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
        reject_invalid_promos: bool = True,
        minimum_lkr: Decimal = MINIMUM_DEPOSIT_LKR,
        maximum_lkr: Decimal | None = MAXIMUM_DEPOSIT_LKR,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_store: Port applying wallet ledger entries.
            promo_store: Port providing promo codes.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning the current aware datetime.
            reject_invalid_promos: Fail the deposit on a rejected promo
                instead of proceeding without a bonus.
            minimum_lkr: Minimum deposit amount.
            maximum_lkr: Optional maximum deposit amount.
        """
        self._ledger_store = ledger_store
        self._promo_store = promo_store
        self._logger = logger or get_usage_logger()
        self._validate_promo = ValidatePromoUseCase(
            promo_store,
            logger=self._logger,
            clock=clock,
        )
        self._reject_invalid_promos = reject_invalid_promos
        self._minimum_lkr = minimum_lkr
        self._maximum_lkr = maximum_lkr

    def quote(
        self,
        amount_lkr,
        promo_code: str | None = None,
    ) -> tuple[DepositQuote, str | None]:
        """Return the deposit quote without touching the wallet.

        Returns:
            tuple[DepositQuote, str | None]: Quote and the reason a promo
            was dropped, if any.

        Raises:
            ValidationError: Invalid amount (checked before the promo).
            PromoRejectedError: Rejected promo when rejection is enabled.
        """
        amount = parse_amount(amount_lkr, "deposit amount")
        quote_deposit(
            amount,
            minimum_lkr=self._minimum_lkr,
            maximum_lkr=self._maximum_lkr,
        )
        details, promo_error = self._resolve_promo(promo_code)
        quote = quote_deposit(
            amount,
            details,
            minimum_lkr=self._minimum_lkr,
            maximum_lkr=self._maximum_lkr,
        )
        return quote, promo_error

    def execute(
        self,
        user_id: str,
        amount_lkr,
        promo_code: str | None = None,
    ) -> DepositResult:
        """Credit the deposit and its bonus to the user's wallet.

        The deposit, the bonus and the promo usage increment are written in
        one ledger batch, so a credited bonus is always counted against the
        promo's usage limit.
        """
        quote, promo_error = self.quote(amount_lkr, promo_code)
        try:
            balance = self._apply(user_id, quote)
        except UsageLimitReachedError as exc:
            # The last use was taken between validation and the write.
            if self._reject_invalid_promos:
                raise
            self._logger.warning(
                f"Proceeding without bonus, promo rejected: {exc}"
            )
            quote = replace(quote, bonus_lkr=Decimal("0"), promo_code=None)
            promo_error = str(exc)
            balance = self._apply(user_id, quote)
        self._logger.info(
            f"Deposit credited: user={user_id}, amount={quote.amount_lkr}, "
            f"bonus={quote.bonus_lkr}, promo={quote.promo_code}"
        )
        return DepositResult(
            quote=quote,
            balance=balance,
            promo_error=promo_error,
        )

    def _apply(self, user_id: str, quote: DepositQuote) -> WalletBalance:
        entries = [
            LedgerEntry(
                kind=TransactionKind.DEPOSIT,
                amount_lkr=quote.amount_lkr,
                cash_delta_lkr=quote.amount_lkr,
                description=f"Deposited {round_lkr(quote.amount_lkr)} LKR",
            )
        ]
        redeem_code = None
        if quote.bonus_lkr > 0:
            entries.append(
                LedgerEntry(
                    kind=TransactionKind.BONUS,
                    amount_lkr=quote.bonus_lkr,
                    cash_delta_lkr=quote.bonus_lkr,
                    description=(
                        f"Promo bonus {quote.promo_code}: "
                        f"{round_lkr(quote.bonus_lkr)} LKR"
                    ),
                )
            )
            redeem_code = quote.promo_code
        return self._ledger_store.apply_entries(
            user_id,
            entries,
            redeem_promo_code=redeem_code,
        )

    def _resolve_promo(
        self,
        promo_code: str | None,
    ) -> tuple[PromoDetails | None, str | None]:
        if not promo_code or not promo_code.strip():
            return None, None
        try:
            return (
                self._validate_promo.execute(
                    promo_code,
                    PromoType.DEPOSIT_BONUS,
                ),
                None,
            )
        except PromoRejectedError as exc:
            if self._reject_invalid_promos:
                raise
            self._logger.warning(
                f"Proceeding without bonus, promo rejected: {exc}"
            )
            return None, str(exc)


__all__ = ["DepositFundsUseCase", "DepositResult"]
