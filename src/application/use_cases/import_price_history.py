"""Use case to backfill the price history from external records."""

from collections.abc import Iterable
from dataclasses import dataclass

from src.application.ports.price_source import PriceSourcePort
from src.domain.models.pricing import PriceRecord
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ImportSummary:
    inserted: int
    skipped: int
    rejected: int

    @property
    def total(self) -> int:
        return self.inserted + self.skipped + self.rejected


class ImportPriceHistoryUseCase:
    """Append historical prices, keeping existing dates untouched."""

    def __init__(self, price_source: PriceSourcePort, logger=None) -> None:
        self._price_source = price_source
        self._logger = logger or get_app_logger()

    def execute(self, records: Iterable[PriceRecord]) -> ImportSummary:
        """Append ``records``; non-positive prices are rejected.

        Returns:
            ImportSummary: Counts of inserted, already present and rejected
            records.
        """
        inserted = skipped = rejected = 0
        for record in sorted(records, key=lambda item: item.price_date):
            if record.price_per_troy_ounce_lkr <= 0:
                self._logger.warning(
                    f"Rejected price for {record.price_date}: "
                    f"{record.price_per_troy_ounce_lkr}"
                )
                rejected += 1
                continue
            if self._price_source.append_price(record):
                inserted += 1
            else:
                skipped += 1
        summary = ImportSummary(
            inserted=inserted, skipped=skipped, rejected=rejected
        )
        self._logger.info(
            f"Price history import: inserted={inserted}, skipped={skipped}, "
            f"rejected={rejected}"
        )
        return summary


__all__ = ["ImportPriceHistoryUseCase", "ImportSummary"]
