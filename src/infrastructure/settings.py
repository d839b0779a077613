"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os
from pathlib import Path
from typing import Optional

import dotenv

from src.domain.constants import MAXIMUM_DEPOSIT_LKR
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class GoldNestSettings:
    """Runtime settings for the engine.

    Attributes:
        price_history_csv: Optional default CSV file for history imports.
        reject_invalid_promos: Fail deposits carrying a rejected promo code
            instead of crediting them without a bonus.
        maximum_deposit_lkr: Largest accepted single deposit.
        market_history_days: Days of history loaded for the market view.
    """

    price_history_csv: Optional[Path] = None
    reject_invalid_promos: bool = True
    maximum_deposit_lkr: Decimal = MAXIMUM_DEPOSIT_LKR
    market_history_days: int = 60

    @classmethod
    def from_env(cls) -> "GoldNestSettings":
        """Build settings from environment variables.

        Returns:
            GoldNestSettings: Settings sourced from environment variables.

        Raises:
            RuntimeError: If a variable holds an invalid value.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        raw_csv = os.getenv("GOLDNEST_PRICE_HISTORY_CSV")
        price_history_csv = (
            cls._normalize_path(raw_csv, logger=logger)
            if raw_csv
            else cls._default_price_history_csv()
        )
        return cls(
            price_history_csv=price_history_csv,
            reject_invalid_promos=cls._parse_bool(
                "GOLDNEST_REJECT_INVALID_PROMOS", default=True
            ),
            maximum_deposit_lkr=cls._parse_decimal(
                "GOLDNEST_MAX_DEPOSIT_LKR", default=MAXIMUM_DEPOSIT_LKR
            ),
            market_history_days=cls._parse_int(
                "GOLDNEST_MARKET_HISTORY_DAYS", default=60
            ),
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Resolve a path and warn when it does not exist."""
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Price history file does not exist at {path}")
        return path

    @staticmethod
    def _default_price_history_csv() -> Path | None:
        """Return ``data/gold_price_history.csv`` when present."""
        candidate = get_project_root() / "data" / "gold_price_history.csv"
        return candidate if candidate.exists() else None

    @staticmethod
    def _parse_bool(name: str, default: bool) -> bool:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        raise RuntimeError(f"Invalid boolean for {name}: {raw}")

    @staticmethod
    def _parse_decimal(name: str, default: Decimal) -> Decimal:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = Decimal(raw.strip())
        except InvalidOperation as exc:
            raise RuntimeError(f"Invalid number for {name}: {raw}") from exc
        if not value.is_finite() or value <= 0:
            raise RuntimeError(f"{name} must be a positive number: {raw}")
        return value

    @staticmethod
    def _parse_int(name: str, default: int) -> int:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip())
        except ValueError as exc:
            raise RuntimeError(f"Invalid integer for {name}: {raw}") from exc
        if value <= 0:
            raise RuntimeError(f"{name} must be positive: {raw}")
        return value


__all__ = ["GoldNestSettings"]
