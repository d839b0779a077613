"""Port for the admin action log."""

from datetime import datetime
from typing import Protocol

from src.domain.models.audit import AdminAction, AuditLogEntry


class AuditLogPort(Protocol):
    """Port exposing the admin audit log."""

    def record(self, admin_name: str, action: AdminAction) -> AuditLogEntry:
        """Append an entry and return it."""

    def fetch_entry(self, entry_id: int) -> AuditLogEntry | None:
        """Return one entry by id."""

    def list_entries(self, limit: int | None = None) -> list[AuditLogEntry]:
        """Return entries, newest first."""

    def mark_undone(
        self,
        entry_id: int,
        admin_name: str,
        undone_at: datetime,
    ) -> None:
        """Flag an entry as reverted."""


__all__ = ["AuditLogPort"]
