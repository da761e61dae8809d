"""Tests for the GetCustomerStatisticsUseCase."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_customer_statistics import (
    GetCustomerStatisticsUseCase,
)
from src.domain.models import InvoiceTotalsRow


def test_execute_combines_invoice_and_payment_totals() -> None:
    """Statistics should include counts, totals and the last invoice."""
    repository = MagicMock()
    repository.fetch_invoice_totals.return_value = InvoiceTotalsRow(
        invoice_count=3,
        total_amount=Decimal("90.30"),
        last_created_at=datetime(2024, 4, 2, 18, 30),
    )
    repository.fetch_payment_total.return_value = Decimal("40")

    use_case = GetCustomerStatisticsUseCase(
        ledger_repository=repository,
        logger=MagicMock(),
    )

    stats = use_case.execute("cust-1")

    assert stats.total_invoices == 3
    assert stats.total_invoices_amount == Decimal("90.30")
    assert stats.total_payments == Decimal("40")
    assert stats.average_order_value == Decimal("30.10")
    assert stats.last_invoice_date == date(2024, 4, 2)
    repository.fetch_invoice_totals.assert_called_once_with("cust-1")
    repository.fetch_payment_total.assert_called_once_with("cust-1")


def test_execute_handles_customer_without_history() -> None:
    """A customer without invoices should get zeroed statistics."""
    repository = MagicMock()
    repository.fetch_invoice_totals.return_value = InvoiceTotalsRow(
        invoice_count=0,
        total_amount=None,
    )
    repository.fetch_payment_total.return_value = None

    use_case = GetCustomerStatisticsUseCase(
        ledger_repository=repository,
        logger=MagicMock(),
    )

    stats = use_case.execute("cust-1")

    assert stats.total_invoices == 0
    assert stats.total_invoices_amount == Decimal("0")
    assert stats.total_payments == Decimal("0")
    assert stats.average_order_value == Decimal("0")
    assert stats.last_invoice_date is None
