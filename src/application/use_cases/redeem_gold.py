"""Use case to request delivery of physical gold coins."""

from dataclasses import dataclass
from datetime import date
from typing import Callable

from src.application.ports.ledger_store import LedgerStorePort
from src.application.ports.settings_store import SettingsStorePort
from src.application.use_cases.market_utils import load_fee_schedule
from src.domain.errors import InsufficientBalanceError, ValidationError
from src.domain.models.ledger import (
    LedgerEntry,
    TransactionKind,
    TransactionStatus,
    WalletBalance,
)
from src.domain.models.quotes import RedemptionQuote
from src.domain.services.trades import quote_redemption
from src.infrastructure.logging.logger import get_usage_logger


@dataclass(frozen=True)
class RedemptionResult:
    quote: RedemptionQuote
    balance: WalletBalance


class RedeemGoldUseCase:
    """Debit gold and the delivery fee for a coin redemption."""

    def __init__(
        self,
        ledger_store: LedgerStorePort,
        settings_store: SettingsStorePort | None = None,
        logger=None,
        today: Callable[[], date] | None = None,
    ) -> None:
        self._ledger_store = ledger_store
        self._settings_store = settings_store
        self._logger = logger or get_usage_logger()
        self._today = today or date.today

    def quote(self, item_size: str, quantity) -> RedemptionQuote:
        return quote_redemption(
            item_size,
            quantity,
            load_fee_schedule(self._settings_store),
            today=self._today(),
        )

    def execute(
        self,
        user_id: str,
        item_size: str,
        quantity,
        delivery_address: str | None,
    ) -> RedemptionResult:
        """Redeem ``quantity`` coins of ``item_size``.

        Raises:
            ValidationError: Unknown size, bad quantity or missing address.
            InsufficientBalanceError: Gold or cash (for the fee) too low.
        """
        if not delivery_address or not delivery_address.strip():
            raise ValidationError("Delivery address is required")
        quote = self.quote(item_size, quantity)
        balance = self._ledger_store.fetch_balance(user_id)
        if balance.gold_balance_grams < quote.gold_required_grams:
            raise InsufficientBalanceError(
                f"Insufficient gold balance: {balance.gold_balance_grams} "
                f"< {quote.gold_required_grams}"
            )
        if balance.cash_balance_lkr < quote.delivery_fee_lkr:
            raise InsufficientBalanceError(
                f"Insufficient wallet balance for delivery fee: "
                f"{balance.cash_balance_lkr} < {quote.delivery_fee_lkr}"
            )
        entry = LedgerEntry(
            kind=TransactionKind.REDEMPTION,
            amount_lkr=quote.delivery_fee_lkr,
            cash_delta_lkr=-quote.delivery_fee_lkr,
            gold_delta_grams=-quote.gold_required_grams,
            amount_grams=quote.gold_required_grams,
            fee_lkr=quote.delivery_fee_lkr,
            description=(
                f"Redemption: {quote.item_description} "
                f"to {delivery_address.strip()}"
            ),
            status=TransactionStatus.PROCESSING,
        )
        updated = self._ledger_store.apply_entries(user_id, [entry])
        self._logger.info(
            f"Redemption requested: user={user_id}, "
            f"items={quote.item_description}, "
            f"grams={quote.gold_required_grams}"
        )
        return RedemptionResult(quote=quote, balance=updated)


__all__ = ["RedeemGoldUseCase", "RedemptionResult"]
