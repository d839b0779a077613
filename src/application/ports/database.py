"""Database ports for the GoldNest engine.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide a
concrete adapter that satisfies this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the platform database engine."""

    def get_engine(self) -> Engine:
        """Get the engine for the platform database.

        Returns:
            Engine: SQLAlchemy engine connected to the platform database.
        """


__all__ = ["DatabaseEnginePort"]
