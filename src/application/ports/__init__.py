"""Application ports package."""

from .customer_ledger_repository import CustomerLedgerRepositoryPort
from .database import DatabaseEnginePort

__all__ = [
    "CustomerLedgerRepositoryPort",
    "DatabaseEnginePort",
]
