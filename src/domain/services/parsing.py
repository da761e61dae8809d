"""Domain parsing helpers turning raw records into ledger transactions."""

from collections.abc import Iterable
from datetime import date, datetime, time

from src.domain.constants import DEFAULT_INVOICE_LABEL, DEFAULT_PAYMENT_LABEL
from src.domain.models.records import (
    InvoiceRecord,
    PaymentRecord,
    RawDate,
    RawTime,
)
from src.domain.models.statement import LedgerTransaction, TransactionKind
from src.utils.decimal_utils import parse_decimal


def parse_date(value: RawDate) -> date | None:
    """Extract the calendar date from a raw date or timestamp.

    Args:
        value: Date, datetime or ISO formatted string.

    Returns:
        date | None: Parsed date, or None when missing or unparseable.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    cleaned = value.strip()
    if not cleaned:
        return None
    try:
        return datetime.fromisoformat(cleaned).date()
    except ValueError:
        pass
    try:
        return date.fromisoformat(cleaned[:10])
    except ValueError:
        return None


def parse_time(value: RawTime) -> time | None:
    """Parse a time of day, dropping any timezone information.

    Args:
        value: Time instance or ``HH:MM[:SS]`` string.

    Returns:
        time | None: Naive time, or None when missing or unparseable.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.time()
    if isinstance(value, time):
        return value.replace(tzinfo=None)
    if not isinstance(value, str):
        return None
    cleaned = value.strip()
    if not cleaned:
        return None
    try:
        return time.fromisoformat(cleaned).replace(tzinfo=None)
    except ValueError:
        return None


def timestamp_minutes(value: RawDate) -> time | None:
    """Return the ``HH:MM`` part of a timestamp, if it carries one."""
    if isinstance(value, datetime):
        return value.time().replace(second=0, microsecond=0)
    if not isinstance(value, str):
        return None
    cleaned = value.strip().replace(" ", "T", 1)
    if "T" not in cleaned:
        return None
    return parse_time(cleaned.split("T", 1)[1][:5])


def invoice_to_transaction(
    record: InvoiceRecord,
    *,
    default_label: str = DEFAULT_INVOICE_LABEL,
    logger=None,
) -> LedgerTransaction | None:
    """Tag an invoice as a balance-increasing transaction.

    Args:
        record: Raw invoice row.
        default_label: Label used when the invoice has no type.
        logger: Optional logger used for warnings on skipped rows.

    Returns:
        LedgerTransaction | None: Parsed transaction, or None when malformed.
    """
    amount = parse_decimal(record.total_amount)
    entry_date = parse_date(record.created_at)
    if amount is None or entry_date is None:
        _warn_malformed(
            logger,
            "invoice",
            record.id,
            record.total_amount,
            record.created_at,
        )
        return None
    if amount < 0 and logger is not None:
        logger.warning(f"Invoice {record.id} has a negative amount: {amount}")
    label = record.invoice_type or default_label
    number = record.invoice_number or record.id
    return LedgerTransaction(
        id=record.id,
        kind=TransactionKind.INVOICE,
        date=entry_date,
        time=parse_time(record.time),
        description=f"{label} - {number}",
        amount=amount,
        register_name=record.register_name,
    )


def payment_to_transaction(
    record: PaymentRecord,
    *,
    default_label: str = DEFAULT_PAYMENT_LABEL,
    logger=None,
) -> LedgerTransaction | None:
    """Tag a payment as a balance-decreasing transaction.

    The payment date falls back to the creation date only when no payment
    date was recorded; a recorded but unparseable payment date is malformed.

    Args:
        record: Raw payment row.
        default_label: Description used when the payment has no notes.
        logger: Optional logger used for warnings on skipped rows.

    Returns:
        LedgerTransaction | None: Parsed transaction, or None when malformed.
    """
    amount = parse_decimal(record.amount)
    raw_date = record.payment_date
    if raw_date is None or (isinstance(raw_date, str) and not raw_date.strip()):
        raw_date = record.created_at
    entry_date = parse_date(raw_date)
    if amount is None or entry_date is None:
        _warn_malformed(logger, "payment", record.id, record.amount, raw_date)
        return None
    if amount < 0 and logger is not None:
        logger.warning(f"Payment {record.id} has a negative amount: {amount}")
    return LedgerTransaction(
        id=record.id,
        kind=TransactionKind.PAYMENT,
        date=entry_date,
        time=timestamp_minutes(record.created_at),
        description=record.notes or default_label,
        amount=amount,
        register_name=record.register_name,
    )


def tag_transactions(
    invoices: Iterable[InvoiceRecord],
    payments: Iterable[PaymentRecord],
    *,
    invoice_label: str = DEFAULT_INVOICE_LABEL,
    payment_label: str = DEFAULT_PAYMENT_LABEL,
    logger=None,
) -> tuple[list[LedgerTransaction], int]:
    """Parse invoices then payments, keeping their input order.

    Returns:
        tuple[list[LedgerTransaction], int]: Valid transactions and the number
        of malformed records that were skipped.
    """
    transactions: list[LedgerTransaction] = []
    skipped = 0
    for invoice in invoices:
        parsed = invoice_to_transaction(
            invoice,
            default_label=invoice_label,
            logger=logger,
        )
        if parsed is None:
            skipped += 1
        else:
            transactions.append(parsed)
    for payment in payments:
        parsed = payment_to_transaction(
            payment,
            default_label=payment_label,
            logger=logger,
        )
        if parsed is None:
            skipped += 1
        else:
            transactions.append(parsed)
    return transactions, skipped


def _warn_malformed(
    logger,
    kind: str,
    record_id: str,
    raw_amount,
    raw_date,
) -> None:
    if logger is None:
        return
    logger.warning(
        f"Skipping malformed {kind} {record_id}: "
        f"amount={raw_amount!r}, date={raw_date!r}"
    )


__all__ = [
    "parse_date",
    "parse_time",
    "timestamp_minutes",
    "invoice_to_transaction",
    "payment_to_transaction",
    "tag_transactions",
]
