"""SQLAlchemy engine management for the storefront database.

The storefront is read through one pooled engine created on first use from
``STORE_DB_URL``. Values from a local ``.env`` file are honoured.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort

STORE_DB_URL_VAR = "STORE_DB_URL"


def _get_env_var(name: str) -> str:
    """Return a required environment variable after loading ``.env``.

    Args:
        name: Variable name.

    Returns:
        str: Non-empty value.

    Raises:
        RuntimeError: If the variable is unset or blank.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(
    db_url: str,
    pool_size: int = 5,
    max_overflow: int = 5,
) -> Engine:
    """Build a pooled engine that checks connections before handing them out.

    Args:
        db_url: SQLAlchemy URL including driver and credentials.
        pool_size: Connections kept open in the pool.
        max_overflow: Extra connections allowed under load.

    Returns:
        Engine: Configured engine.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_pre_ping=True,
        future=True,
    )


_store_engine: Optional[Engine] = None


def get_store_engine() -> Engine:
    """Return the shared storefront engine, creating it on first call."""
    global _store_engine
    if _store_engine is None:
        _store_engine = _create_engine(_get_env_var(STORE_DB_URL_VAR))
    return _store_engine


def dispose_store_engine() -> None:
    """Close pooled connections and forget the shared engine."""
    global _store_engine
    if _store_engine is not None:
        _store_engine.dispose()
    _store_engine = None


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """Expose the shared storefront engine through the database port."""

    def get_store_engine(self) -> Engine:
        return get_store_engine()


__all__ = [
    "dispose_store_engine",
    "get_store_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
