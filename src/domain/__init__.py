"""Domain package for business rules and core models."""

from .constants import (
    DEFAULT_INVOICE_LABEL,
    DEFAULT_PAGE_LIMIT,
    DEFAULT_PAYMENT_LABEL,
)
from .models import (
    CustomerAccount,
    CustomerStatistics,
    InvoiceItem,
    InvoiceRecord,
    LedgerTransaction,
    PageRequest,
    PaymentRecord,
    RecordPage,
    StatementEntry,
    StatementPage,
    TransactionKind,
)
from .services import (
    apply_running_balances,
    build_statement,
    compute_starting_balance,
    paginate,
    sort_descending,
    statement_page_to_payload,
    statistics_to_payload,
)

__all__ = [
    "DEFAULT_INVOICE_LABEL",
    "DEFAULT_PAGE_LIMIT",
    "DEFAULT_PAYMENT_LABEL",
    "CustomerAccount",
    "CustomerStatistics",
    "InvoiceItem",
    "InvoiceRecord",
    "LedgerTransaction",
    "PageRequest",
    "PaymentRecord",
    "RecordPage",
    "StatementEntry",
    "StatementPage",
    "TransactionKind",
    "apply_running_balances",
    "build_statement",
    "compute_starting_balance",
    "paginate",
    "sort_descending",
    "statement_page_to_payload",
    "statistics_to_payload",
]
