"""Domain services building customer account statements.

The customer's current balance is the only balance that is stored. The
balance before the oldest transaction is recovered by undoing every
transaction from the current balance (newest to oldest), then the statement
is replayed oldest to newest from that starting point so that the most
recent entry lands exactly on the current balance.
"""

from collections.abc import Iterable, Sequence
from decimal import Decimal
from typing import TypeVar

from src.domain.constants import DEFAULT_INVOICE_LABEL, DEFAULT_PAYMENT_LABEL
from src.domain.models.records import InvoiceRecord, PaymentRecord
from src.domain.models.statement import (
    LedgerTransaction,
    StatementEntry,
    StatementPage,
    TransactionKind,
)
from src.domain.services.parsing import tag_transactions
from src.utils.decimal_utils import coerce_decimal

T = TypeVar("T")


def sort_descending(
    transactions: Iterable[LedgerTransaction],
) -> list[LedgerTransaction]:
    """Sort transactions most recent first.

    Equal timestamps keep their input order (the sort is stable).
    """
    return sorted(transactions, key=lambda item: item.sort_key, reverse=True)


def compute_starting_balance(
    transactions: Sequence[LedgerTransaction],
    current_balance: Decimal,
) -> Decimal:
    """Undo every transaction from the current balance.

    Args:
        transactions: Transactions sorted most recent first.
        current_balance: Balance as of now.

    Returns:
        Decimal: Balance before the oldest transaction.
    """
    balance = current_balance
    for transaction in transactions:
        balance -= transaction.signed_effect
    return balance


def apply_running_balances(
    transactions: Sequence[LedgerTransaction],
    starting_balance: Decimal,
) -> list[StatementEntry]:
    """Replay transactions oldest first and record each resulting balance.

    Args:
        transactions: Transactions sorted most recent first.
        starting_balance: Balance before the oldest transaction.

    Returns:
        list[StatementEntry]: Entries sorted most recent first.
    """
    balance = starting_balance
    entries: list[StatementEntry] = []
    for transaction in reversed(transactions):
        balance += transaction.signed_effect
        is_invoice = transaction.kind is TransactionKind.INVOICE
        entries.append(
            StatementEntry(
                id=transaction.id,
                date=transaction.date,
                time=transaction.time,
                kind=transaction.kind,
                description=transaction.description,
                invoice_value=transaction.amount if is_invoice else Decimal("0"),
                paid_amount=Decimal("0") if is_invoice else transaction.amount,
                running_balance=balance,
                register_name=transaction.register_name,
            )
        )
    entries.reverse()
    return entries


def paginate(
    items: Sequence[T],
    offset: int,
    limit: int,
) -> tuple[list[T], bool]:
    """Slice one page out of a sequence.

    Raises:
        ValueError: If offset is negative or limit is not positive.
    """
    _validate_window(offset, limit)
    return list(items[offset:offset + limit]), len(items) > offset + limit


def build_statement(
    invoices: Iterable[InvoiceRecord],
    payments: Iterable[PaymentRecord],
    current_balance,
    *,
    offset: int,
    limit: int,
    invoice_label: str = DEFAULT_INVOICE_LABEL,
    payment_label: str = DEFAULT_PAYMENT_LABEL,
    logger=None,
) -> StatementPage:
    """Build one page of a customer's account statement.

    Args:
        invoices: Invoice rows of the customer, in any order.
        payments: Payment rows of the customer, in any order.
        current_balance: Current account balance (None counts as zero).
        offset: Number of entries to skip, most recent first.
        limit: Maximum number of entries on the page.
        invoice_label: Description label for invoices without a type.
        payment_label: Description for payments without notes.
        logger: Optional logger used for warnings on skipped rows.

    Returns:
        StatementPage: Requested entries with paging and skip counters.

    Raises:
        ValueError: If offset is negative or limit is not positive.
    """
    _validate_window(offset, limit)
    transactions, skipped = tag_transactions(
        invoices,
        payments,
        invoice_label=invoice_label,
        payment_label=payment_label,
        logger=logger,
    )
    if not transactions:
        return StatementPage(
            entries=[],
            total_count=0,
            has_more=False,
            skipped_count=skipped,
        )

    ordered = sort_descending(transactions)
    starting_balance = compute_starting_balance(
        ordered,
        coerce_decimal(current_balance),
    )
    entries = apply_running_balances(ordered, starting_balance)
    page, has_more = paginate(entries, offset, limit)
    return StatementPage(
        entries=page,
        total_count=len(entries),
        has_more=has_more,
        skipped_count=skipped,
        starting_balance=starting_balance,
    )


def _validate_window(offset: int, limit: int) -> None:
    if offset < 0:
        raise ValueError(f"offset must be >= 0, got {offset}")
    if limit <= 0:
        raise ValueError(f"limit must be > 0, got {limit}")


__all__ = [
    "sort_descending",
    "compute_starting_balance",
    "apply_running_balances",
    "paginate",
    "build_statement",
]
