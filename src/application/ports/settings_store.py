"""Port for admin-editable platform settings."""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Protocol


class SettingsStorePort(Protocol):
    """Port exposing numeric key/value settings."""

    def fetch_settings(self, keys: Iterable[str]) -> dict[str, Decimal | None]:
        """Return stored values for ``keys``; missing keys map to None."""

    def save_settings(self, values: Mapping[str, Decimal | None]) -> None:
        """Upsert values; a None value removes the key."""


__all__ = ["SettingsStorePort"]
