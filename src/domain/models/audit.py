"""Domain models for reversible admin actions.

Each reversible action is its own variant carrying exactly the payload its
reversal needs.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from src.domain.models.promos import PromoCode


@dataclass(frozen=True)
class FeeSettingsUpdated:
    """Fee settings were changed; ``previous_values`` restores them."""

    previous_values: dict[str, Decimal | None] = field(default_factory=dict)

    label = "Updated platform settings"


@dataclass(frozen=True)
class PromoCodeCreated:
    code: str

    label = "Created promo code"


@dataclass(frozen=True)
class PromoCodeDeleted:
    promo: PromoCode

    label = "Deleted promo code"


@dataclass(frozen=True)
class ActionUndone:
    """Marker recorded when another entry is reverted."""

    undone_entry_id: int

    label = "Undid admin action"


AdminAction = (
    FeeSettingsUpdated | PromoCodeCreated | PromoCodeDeleted | ActionUndone
)

REVERSIBLE_ACTIONS = (FeeSettingsUpdated, PromoCodeCreated, PromoCodeDeleted)


@dataclass(frozen=True)
class AuditLogEntry:
    """Persisted admin action."""

    entry_id: int
    admin_name: str
    action: AdminAction
    created_at: datetime
    is_undone: bool = False
    undone_by: str | None = None
    undone_at: datetime | None = None

    @property
    def is_undoable(self) -> bool:
        return isinstance(self.action, REVERSIBLE_ACTIONS) and not self.is_undone


__all__ = [
    "FeeSettingsUpdated",
    "PromoCodeCreated",
    "PromoCodeDeleted",
    "ActionUndone",
    "AdminAction",
    "REVERSIBLE_ACTIONS",
    "AuditLogEntry",
]
