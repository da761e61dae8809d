"""Domain models package."""

from .customers import CustomerAccount, CustomerStatistics
from .records import (
    InvoiceItem,
    InvoiceRecord,
    InvoiceTotalsRow,
    PaymentRecord,
)
from .statement import (
    LedgerTransaction,
    PageRequest,
    RecordPage,
    StatementEntry,
    StatementPage,
    TransactionKind,
)

__all__ = [
    "CustomerAccount",
    "CustomerStatistics",
    "InvoiceItem",
    "InvoiceRecord",
    "InvoiceTotalsRow",
    "PaymentRecord",
    "LedgerTransaction",
    "PageRequest",
    "RecordPage",
    "StatementEntry",
    "StatementPage",
    "TransactionKind",
]
