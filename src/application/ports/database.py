"""Port giving the application layer access to the storefront engine."""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Supplies the SQLAlchemy engine that repositories query."""

    def get_store_engine(self) -> Engine:
        """Return the engine bound to the storefront database."""


__all__ = ["DatabaseEnginePort"]
