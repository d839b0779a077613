"""CLI adapter to store the daily gold price.

The scraping job passes the ounce price it found; operators can also enter
a gram price by hand.
"""

import argparse
from datetime import date
from decimal import Decimal, InvalidOperation

from src.application.use_cases.record_daily_price import (
    RecordDailyPriceUseCase,
)
from src.domain.errors import GoldNestError
from src.infrastructure.container import build_price_repository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.price_scraper import FixedPriceScraper


def _decimal(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation as exc:
        raise argparse.ArgumentTypeError(f"Invalid number: {value}") from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    price = parser.add_mutually_exclusive_group(required=True)
    price.add_argument("--ounce-price", type=_decimal, help="LKR per troy oz")
    price.add_argument("--gram-price", type=_decimal, help="LKR per gram")
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Price date (YYYY-MM-DD), defaults to today",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Record one price and print whether a row was written."""
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()
    price_source = build_price_repository()
    try:
        if args.ounce_price is not None:
            use_case = RecordDailyPriceUseCase(
                price_source,
                scraper=FixedPriceScraper(args.ounce_price),
                logger=logger,
            )
            written = use_case.execute(price_date=args.date)
        else:
            use_case = RecordDailyPriceUseCase(price_source, logger=logger)
            written = use_case.record_gram_price(
                args.gram_price, price_date=args.date
            )
    except GoldNestError as exc:
        logger.error(str(exc))
        print(f"Price not recorded: {exc}")
        return 1

    if written:
        print("Gold price recorded.")
    else:
        print("A gold price already exists for that date.")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
