"""Domain models for account statements."""

from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class TransactionKind(str, Enum):
    """Kind of a ledger transaction."""

    INVOICE = "invoice"
    PAYMENT = "payment"


@dataclass(frozen=True)
class LedgerTransaction:
    """Parsed invoice or payment ready to be placed on a statement."""

    id: str
    kind: TransactionKind
    date: date
    time: time | None
    description: str
    amount: Decimal
    register_name: str | None = None

    @property
    def signed_effect(self) -> Decimal:
        """Return the effect on the balance (invoices add, payments subtract)."""
        if self.kind is TransactionKind.INVOICE:
            return self.amount
        return -self.amount

    @property
    def sort_key(self) -> tuple[date, bool, time]:
        """Chronological key; entries without a time sort first in their day."""
        return (self.date, self.time is not None, self.time or time.min)


@dataclass(frozen=True)
class StatementEntry:
    """Single statement line with the balance after it was applied."""

    id: str
    date: date
    time: time | None
    kind: TransactionKind
    description: str
    invoice_value: Decimal
    paid_amount: Decimal
    running_balance: Decimal
    register_name: str | None = None


@dataclass(frozen=True)
class StatementPage:
    """Requested page of a statement, most recent entry first.

    Attributes:
        entries: Statement entries in the requested window.
        total_count: Number of valid transactions on the whole statement.
        has_more: Whether entries exist past the requested window.
        skipped_count: Number of malformed records left out.
        starting_balance: Balance before the oldest transaction, if any.
    """

    entries: list[StatementEntry]
    total_count: int
    has_more: bool
    skipped_count: int = 0
    starting_balance: Decimal | None = None


@dataclass(frozen=True)
class PageRequest:
    """One-based page number and page size."""

    page: int
    limit: int

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")
        if self.limit <= 0:
            raise ValueError(f"limit must be > 0, got {self.limit}")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class RecordPage(Generic[T]):
    """Page of raw invoice or payment records."""

    items: list[T]
    total_count: int
    has_more: bool


__all__ = [
    "TransactionKind",
    "LedgerTransaction",
    "StatementEntry",
    "StatementPage",
    "PageRequest",
    "RecordPage",
]
