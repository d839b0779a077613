"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal

LKR_QUANTUM = Decimal("0.01")
GRAMS_QUANTUM = Decimal("0.0001")
STORED_GRAMS_QUANTUM = Decimal("0.000001")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value, zero for None.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def coerce_optional_decimal(value) -> Decimal | None:
    """Like coerce_decimal but keeps None."""
    if value is None:
        return None
    return coerce_decimal(value)


def round_lkr(value: Decimal) -> Decimal:
    """Round an LKR amount to cents for display or storage."""
    return value.quantize(LKR_QUANTUM, rounding=ROUND_HALF_UP)


def round_grams(value: Decimal) -> Decimal:
    return value.quantize(GRAMS_QUANTUM, rounding=ROUND_HALF_UP)


def round_stored_grams(value: Decimal) -> Decimal:
    """Round a gram amount to the precision of the gold balance columns."""
    return value.quantize(STORED_GRAMS_QUANTUM, rounding=ROUND_HALF_UP)


__all__ = [
    "LKR_QUANTUM",
    "GRAMS_QUANTUM",
    "STORED_GRAMS_QUANTUM",
    "coerce_decimal",
    "coerce_optional_decimal",
    "round_lkr",
    "round_grams",
    "round_stored_grams",
]
