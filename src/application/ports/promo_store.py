"""Port for promo code storage."""

from typing import Protocol

from src.domain.models.promos import PromoCode


class PromoStorePort(Protocol):
    """Port exposing promo codes."""

    def find_promo(self, code: str) -> PromoCode | None:
        """Return the promo stored under the uppercase ``code``."""

    def list_promos(self) -> list[PromoCode]:
        """Return all stored promos ordered by code."""

    def save_promo(self, promo: PromoCode) -> None:
        """Insert a promo code."""

    def delete_promo(self, code: str) -> bool:
        """Delete a promo code; return True if it existed."""


__all__ = ["PromoStorePort"]
