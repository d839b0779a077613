"""Domain validation helpers."""

from decimal import Decimal, InvalidOperation

from src.domain.errors import BelowMinimumError, ValidationError


def parse_amount(value, field_name: str = "amount") -> Decimal:
    """Convert raw numeric input to a finite Decimal.

    Args:
        value: Raw value (number or numeric string).
        field_name: Name used in error messages.

    Returns:
        Decimal: Parsed value.

    Raises:
        ValidationError: If the value is missing, boolean or not a finite
            number.
    """
    if value is None or isinstance(value, bool):
        raise ValidationError(f"Invalid {field_name}: {value!r}")
    if isinstance(value, Decimal):
        parsed = value
    else:
        try:
            parsed = Decimal(str(value).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(
                f"Invalid {field_name}: {value!r}"
            ) from exc
    if not parsed.is_finite():
        raise ValidationError(f"Invalid {field_name}: {value!r}")
    return parsed


def require_minimum(amount: Decimal, minimum: Decimal) -> None:
    """Raise BelowMinimumError when ``amount`` is below ``minimum``."""
    if amount < minimum:
        raise BelowMinimumError(amount, minimum)


def require_positive(amount: Decimal, field_name: str = "amount") -> None:
    if amount <= 0:
        raise ValidationError(f"{field_name} must be positive: {amount}")


__all__ = ["parse_amount", "require_minimum", "require_positive"]
