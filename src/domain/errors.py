"""Error taxonomy raised by the pricing and accrual engine."""


class GoldNestError(Exception):
    """Base class for domain errors."""


class ValidationError(GoldNestError):
    """Input rejected before any computation is attempted."""


class BelowMinimumError(ValidationError):
    """Amount is below the platform minimum."""

    def __init__(self, amount, minimum) -> None:
        super().__init__(f"Amount {amount} is below the minimum of {minimum}")
        self.amount = amount
        self.minimum = minimum


class InsufficientBalanceError(ValidationError):
    """Wallet balance does not cover the requested operation."""


class PromoRejectedError(GoldNestError):
    """Promo code cannot be applied."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code


class NotFoundError(PromoRejectedError):
    """Promo code is unknown, inactive, or meant for another purpose."""

    def __init__(self, code: str) -> None:
        super().__init__(code, f"Invalid promo code: {code}")


class ExpiredError(PromoRejectedError):
    """Promo code expiry instant has been reached."""

    def __init__(self, code: str) -> None:
        super().__init__(code, f"Promo code has expired: {code}")


class UsageLimitReachedError(PromoRejectedError):
    """Promo code has been redeemed the maximum number of times."""

    def __init__(self, code: str) -> None:
        super().__init__(code, f"Promo code usage limit reached: {code}")


class PriceUnavailableError(GoldNestError):
    """No usable gold price to quote against."""

    def __init__(self, message: str = "Gold price quote unavailable") -> None:
        super().__init__(message)


class ActionNotUndoableError(GoldNestError):
    """Admin action is missing, already undone, or not reversible."""


__all__ = [
    "GoldNestError",
    "ValidationError",
    "BelowMinimumError",
    "InsufficientBalanceError",
    "PromoRejectedError",
    "NotFoundError",
    "ExpiredError",
    "UsageLimitReachedError",
    "PriceUnavailableError",
    "ActionNotUndoableError",
]
