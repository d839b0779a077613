"""Database infrastructure for the GoldNest engine.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine connected to the platform database. It belongs to the
infrastructure layer because it deals with external systems.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort

DATABASE_URL_ENV = "GOLDNEST_DB_URL"


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Values from a local ``.env`` file are loaded first.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_platform_engine: Optional[Engine] = None


def get_platform_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the platform database.

    Returns:
        Engine: Lazily initialized engine.
    """
    global _platform_engine
    if _platform_engine is None:
        db_url = _get_env_var(DATABASE_URL_ENV)
        _platform_engine = _create_engine(db_url)
    return _platform_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """Database adapter returning the shared platform engine."""

    def get_engine(self) -> Engine:
        """Return the platform engine."""
        return get_platform_engine()


__all__ = [
    "DATABASE_URL_ENV",
    "SqlAlchemyDatabaseEngineAdapter",
    "get_platform_engine",
]
