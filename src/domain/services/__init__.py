"""Domain services package."""

from .parsing import (
    invoice_to_transaction,
    parse_date,
    parse_time,
    payment_to_transaction,
    tag_transactions,
)
from .serialization import (
    statement_page_to_payload,
    statistics_to_payload,
)
from .statement import (
    apply_running_balances,
    build_statement,
    compute_starting_balance,
    paginate,
    sort_descending,
)

__all__ = [
    "invoice_to_transaction",
    "parse_date",
    "parse_time",
    "payment_to_transaction",
    "tag_transactions",
    "statement_page_to_payload",
    "statistics_to_payload",
    "apply_running_balances",
    "build_statement",
    "compute_starting_balance",
    "paginate",
    "sort_descending",
]
