"""Use case to sell gold back into wallet cash."""

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
from src.domain.models.quotes import SaleQuote
from src.domain.services.trades import quote_sale
from src.domain.services.validation import parse_amount
from src.infrastructure.logging.logger import get_usage_logger
from src.utils.decimal_utils import round_grams, round_lkr


@dataclass(frozen=True)
class SaleResult:
    quote: SaleQuote
    balance: WalletBalance


class SellGoldUseCase:
    """Sell gold; the fee is deducted from the proceeds."""

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

    def quote(self, grams) -> SaleQuote:
        amount = parse_amount(grams, "gold amount")
        price = fetch_latest_gram_price(self._price_source)
        return quote_sale(amount, price, load_fee_schedule(self._settings_store))

    def execute(self, user_id: str, grams) -> SaleResult:
        """Sell ``grams`` of gold and credit the net proceeds.

        Raises:
            BelowMinimumError: Fewer grams than the sell minimum.
            PriceUnavailableError: No current price.
            InsufficientBalanceError: Gold balance below ``grams``.
        """
        quote = self.quote(grams)
        balance = self._ledger_store.fetch_balance(user_id)
        if balance.gold_balance_grams < quote.grams:
            raise InsufficientBalanceError(
                f"Insufficient gold balance: {balance.gold_balance_grams} "
                f"< {quote.grams}"
            )
        entry = LedgerEntry(
            kind=TransactionKind.SELL_GOLD,
            amount_lkr=quote.net_lkr,
            cash_delta_lkr=quote.net_lkr,
            gold_delta_grams=-quote.grams,
            amount_grams=quote.grams,
            price_per_gram_lkr=quote.price_per_gram_lkr,
            fee_lkr=quote.fee_lkr,
            description=(
                f"Sold {round_grams(quote.grams)}g gold for "
                f"{round_lkr(quote.net_lkr)} LKR"
            ),
        )
        updated = self._ledger_store.apply_entries(user_id, [entry])
        self._logger.info(
            f"Gold sold: user={user_id}, grams={quote.grams}, "
            f"net={quote.net_lkr}, fee={quote.fee_lkr}"
        )
        return SaleResult(quote=quote, balance=updated)


__all__ = ["SellGoldUseCase", "SaleResult"]
