"""Use case to convert an LKR amount into grams at the latest price."""

from dataclasses import dataclass
from decimal import Decimal

from src.application.ports.price_source import PriceSourcePort
from src.application.use_cases.market_utils import fetch_latest_gram_price
from src.domain.services.conversion import lkr_to_grams
from src.domain.services.validation import parse_amount, require_positive


@dataclass(frozen=True)
class GoldQuote:
    amount_lkr: Decimal
    grams: Decimal
    price_per_gram_lkr: Decimal


class QuoteGoldUseCase:
    """Answer "how much gold does this amount buy right now"."""

    def __init__(self, price_source: PriceSourcePort) -> None:
        self._price_source = price_source

    def execute(self, amount_lkr) -> GoldQuote:
        """Return the fee-free gram equivalent of ``amount_lkr``.

        Raises:
            ValidationError: Non-numeric or non-positive amount.
            PriceUnavailableError: No current price.
        """
        amount = parse_amount(amount_lkr, "amount")
        require_positive(amount, "amount")
        price = fetch_latest_gram_price(self._price_source)
        return GoldQuote(
            amount_lkr=amount,
            grams=lkr_to_grams(amount, price),
            price_per_gram_lkr=price,
        )


__all__ = ["QuoteGoldUseCase", "GoldQuote"]
