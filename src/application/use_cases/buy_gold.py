"""Use case to convert wallet cash into gold at the latest price."""

from dataclasses import dataclass

from src.application.ports.ledger_store import LedgerStorePort
from src.application.ports.price_source import PriceSourcePort
from src.application.ports.settings_store import SettingsStorePort
from src.application.use_cases.market_utils import (
    fetch_latest_gram_price,
    load_fee_schedule,
)
from src.domain.errors import InsufficientBalanceError
from src.domain.models.ledger import LedgerEntry, TransactionKind, WalletBalance
from src.domain.models.quotes import PurchaseQuote
from src.domain.services.trades import quote_purchase
from src.domain.services.validation import parse_amount
from src.infrastructure.logging.logger import get_usage_logger
from src.utils.decimal_utils import round_grams, round_lkr


@dataclass(frozen=True)
class TradeResult:
    quote: PurchaseQuote
    balance: WalletBalance


class BuyGoldUseCase:
    """Buy gold with wallet cash; the fee is charged on top."""

    def __init__(
        self,
        price_source: PriceSourcePort,
        ledger_store: LedgerStorePort,
        settings_store: SettingsStorePort | None = None,
        logger=None,
    ) -> None:
        self._price_source = price_source
        self._ledger_store = ledger_store
        self._settings_store = settings_store
        self._logger = logger or get_usage_logger()

    def quote(self, amount_lkr) -> PurchaseQuote:
        """Return the purchase quote at the latest price."""
        amount = parse_amount(amount_lkr, "investment amount")
        price = fetch_latest_gram_price(self._price_source)
        return quote_purchase(
            amount, price, load_fee_schedule(self._settings_store)
        )

    def execute(self, user_id: str, amount_lkr) -> TradeResult:
        """Buy gold worth ``amount_lkr``.

        Raises:
            BelowMinimumError: Amount below the investment minimum.
            PriceUnavailableError: No current price.
            InsufficientBalanceError: Cash does not cover amount plus fee.
        """
        quote = self.quote(amount_lkr)
        balance = self._ledger_store.fetch_balance(user_id)
        if balance.cash_balance_lkr < quote.total_cost_lkr:
            raise InsufficientBalanceError(
                f"Insufficient wallet balance: {balance.cash_balance_lkr} "
                f"< {quote.total_cost_lkr}"
            )
        entry = LedgerEntry(
            kind=TransactionKind.INVESTMENT,
            amount_lkr=quote.amount_lkr,
            cash_delta_lkr=-quote.total_cost_lkr,
            gold_delta_grams=quote.grams,
            amount_grams=quote.grams,
            price_per_gram_lkr=quote.price_per_gram_lkr,
            fee_lkr=quote.fee_lkr,
            description=(
                f"Bought {round_grams(quote.grams)}g gold for "
                f"{round_lkr(quote.amount_lkr)} LKR"
            ),
        )
        updated = self._ledger_store.apply_entries(user_id, [entry])
        self._logger.info(
            f"Gold bought: user={user_id}, amount={quote.amount_lkr}, "
            f"grams={quote.grams}, fee={quote.fee_lkr}"
        )
        return TradeResult(quote=quote, balance=updated)


__all__ = ["BuyGoldUseCase", "TradeResult"]
