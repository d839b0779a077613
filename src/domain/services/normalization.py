"""Domain normalization helpers."""

from src.domain.errors import ValidationError


def normalize_promo_code(code: str | None) -> str:
    """Normalize a user-entered promo code for lookup.

    Args:
        code: Raw code typed by the user or an admin.

    Returns:
        str: Uppercase code without surrounding whitespace.

    Raises:
        ValidationError: If the code is empty or contains inner whitespace.
    """
    cleaned = (code or "").strip()
    if not cleaned:
        raise ValidationError("Promo code is required")
    if any(char.isspace() for char in cleaned):
        raise ValidationError(f"Promo code must not contain spaces: {code!r}")
    return cleaned.upper()


def normalize_item_size(item_size: str | None) -> str | None:
    """Normalize a redemption item size such as ``5G`` to ``5g``."""
    if not item_size:
        return None
    cleaned = item_size.strip().lower().replace(" ", "")
    return cleaned or None


__all__ = ["normalize_promo_code", "normalize_item_size"]
