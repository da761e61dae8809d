"""Tests for record parsing helpers."""

from datetime import date, datetime, time, timezone
from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models import InvoiceRecord, PaymentRecord, TransactionKind
from src.domain.services.parsing import (
    invoice_to_transaction,
    parse_date,
    parse_time,
    payment_to_transaction,
    tag_transactions,
    timestamp_minutes,
)


def test_parse_date_accepts_dates_timestamps_and_strings() -> None:
    """Dates should be extracted from every supported representation."""
    assert parse_date(date(2024, 1, 2)) == date(2024, 1, 2)
    assert parse_date(datetime(2024, 1, 2, 23, 59)) == date(2024, 1, 2)
    assert parse_date("2024-01-02") == date(2024, 1, 2)
    assert parse_date("2024-01-02T10:11:12.123456+02:00") == date(2024, 1, 2)
    assert parse_date(" 2024-01-02 10:11 ") == date(2024, 1, 2)


def test_parse_date_rejects_garbage() -> None:
    """Missing or unparseable dates should return None."""
    assert parse_date(None) is None
    assert parse_date("") is None
    assert parse_date("02/01/2024") is None
    assert parse_date(20240102) is None


def test_parse_time_drops_timezone() -> None:
    """Times should be naive so they can be compared together."""
    assert parse_time("08:30") == time(8, 30)
    assert parse_time("08:30:15") == time(8, 30, 15)
    assert parse_time(time(8, 30, tzinfo=timezone.utc)) == time(8, 30)
    assert parse_time("08:30:00+02:00") == time(8, 30)


def test_parse_time_treats_garbage_as_missing() -> None:
    """Unparseable times should count as absent."""
    assert parse_time(None) is None
    assert parse_time("") is None
    assert parse_time("noon") is None


def test_timestamp_minutes_keeps_hours_and_minutes() -> None:
    """Payment times should be truncated to the minute."""
    assert timestamp_minutes("2024-01-02T10:11:12") == time(10, 11)
    assert timestamp_minutes("2024-01-02 10:11:12") == time(10, 11)
    assert timestamp_minutes(datetime(2024, 1, 2, 10, 11, 59)) == time(10, 11)
    assert timestamp_minutes("2024-01-02") is None
    assert timestamp_minutes(date(2024, 1, 2)) is None
    assert timestamp_minutes(None) is None


def test_invoice_description_uses_type_and_number() -> None:
    """Invoices should describe their type and number."""
    record = InvoiceRecord(
        id="1",
        invoice_number="S-0001",
        created_at="2024-01-02T10:00:00",
        time="10:00:00",
        total_amount="12.50",
        invoice_type="Wholesale invoice",
        register_name="Main register",
    )

    transaction = invoice_to_transaction(record)

    assert transaction is not None
    assert transaction.kind is TransactionKind.INVOICE
    assert transaction.description == "Wholesale invoice - S-0001"
    assert transaction.amount == Decimal("12.50")
    assert transaction.signed_effect == Decimal("12.50")
    assert transaction.time == time(10, 0)
    assert transaction.register_name == "Main register"


def test_invoice_without_type_uses_default_label() -> None:
    """The default label should be used when no type is stored."""
    record = InvoiceRecord(
        id="7",
        invoice_number=None,
        created_at=date(2024, 1, 2),
        time=None,
        total_amount=3,
    )

    transaction = invoice_to_transaction(record, default_label="Sale")

    assert transaction.description == "Sale - 7"
    assert transaction.time is None


def test_negative_invoice_is_kept_with_warning() -> None:
    """Negative amounts are unusual but not malformed."""
    logger = MagicMock()
    record = InvoiceRecord(
        id="1",
        invoice_number="R-1",
        created_at="2024-01-02",
        time=None,
        total_amount="-5",
    )

    transaction = invoice_to_transaction(record, logger=logger)

    assert transaction.amount == Decimal("-5")
    logger.warning.assert_called_once()


def test_payment_uses_notes_and_created_at_time() -> None:
    """Payments should take notes as description and created_at time."""
    record = PaymentRecord(
        id="p",
        amount=Decimal("40"),
        payment_date="2024-02-01",
        created_at=datetime(2024, 2, 3, 9, 15, 42),
        notes="Cash at counter",
        register_name="Safe A",
    )

    transaction = payment_to_transaction(record)

    assert transaction.kind is TransactionKind.PAYMENT
    assert transaction.date == date(2024, 2, 1)
    assert transaction.time == time(9, 15)
    assert transaction.description == "Cash at counter"
    assert transaction.signed_effect == Decimal("-40")


def test_payment_falls_back_to_created_at_date() -> None:
    """A missing payment date should fall back to the creation date."""
    record = PaymentRecord(
        id="p",
        amount="1",
        payment_date="  ",
        created_at="2024-02-03T09:15:00",
    )

    transaction = payment_to_transaction(record, default_label="Advance")

    assert transaction.date == date(2024, 2, 3)
    assert transaction.description == "Advance"


def test_payment_with_unparseable_date_is_malformed() -> None:
    """A recorded but invalid payment date should not be replaced."""
    logger = MagicMock()
    record = PaymentRecord(
        id="p",
        amount="1",
        payment_date="31/12/2024",
        created_at="2024-02-03T09:15:00",
    )

    assert payment_to_transaction(record, logger=logger) is None
    logger.warning.assert_called_once()


def test_tag_transactions_keeps_invoices_before_payments() -> None:
    """Tagging should keep input order and count skipped records."""
    invoices = [
        InvoiceRecord(
            id="i1",
            invoice_number="1",
            created_at="2024-01-01",
            time=None,
            total_amount="1",
        ),
        InvoiceRecord(
            id="i2",
            invoice_number="2",
            created_at="2024-01-01",
            time=None,
            total_amount=True,
        ),
    ]
    payments = [
        PaymentRecord(
            id="p1",
            amount="1",
            payment_date="2024-01-01",
            created_at=None,
        )
    ]

    transactions, skipped = tag_transactions(invoices, payments)

    assert [item.id for item in transactions] == ["i1", "p1"]
    assert skipped == 1
