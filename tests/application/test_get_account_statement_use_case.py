"""Tests for the GetAccountStatementUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_account_statement import (
    GetAccountStatementUseCase,
)
from src.domain.models import (
    CustomerAccount,
    InvoiceRecord,
    PageRequest,
    PaymentRecord,
)


def _customer(balance: str) -> CustomerAccount:
    return CustomerAccount(
        id="cust-1",
        name="Mona",
        account_balance=Decimal(balance),
    )


def test_execute_builds_statement_from_repository_rows() -> None:
    """Use case should fetch all rows in range and anchor the balance."""
    repository = MagicMock()
    repository.fetch_invoices.return_value = [
        InvoiceRecord(
            id="i1",
            invoice_number="100",
            created_at="2024-01-01T09:00:00",
            time="09:00",
            total_amount=Decimal("250.00"),
            invoice_type=None,
        )
    ]
    repository.fetch_payments.return_value = [
        PaymentRecord(
            id="p1",
            amount=Decimal("100.00"),
            payment_date=date(2024, 1, 10),
            created_at="2024-01-10T11:00:00",
            notes=None,
        )
    ]
    logger = MagicMock()
    use_case = GetAccountStatementUseCase(
        ledger_repository=repository,
        logger=logger,
        invoice_label="Sale",
        payment_label="Advance",
    )

    result = use_case.execute(
        _customer("150.00"),
        PageRequest(page=1, limit=20),
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 31),
    )

    assert [entry.description for entry in result.entries] == [
        "Advance",
        "Sale - 100",
    ]
    assert [entry.running_balance for entry in result.entries] == [
        Decimal("150.00"),
        Decimal("250.00"),
    ]
    assert result.starting_balance == Decimal("0.00")
    repository.fetch_invoices.assert_called_once_with(
        "cust-1",
        date(2024, 1, 1),
        date(2024, 1, 31),
    )
    repository.fetch_payments.assert_called_once_with(
        "cust-1",
        date(2024, 1, 1),
        date(2024, 1, 31),
    )
    logger.warning.assert_not_called()


def test_execute_applies_page_window() -> None:
    """The second page should start after the first window."""
    repository = MagicMock()
    repository.fetch_invoices.return_value = [
        InvoiceRecord(
            id=f"i{day}",
            invoice_number=str(day),
            created_at=date(2024, 2, day),
            time=None,
            total_amount=1,
        )
        for day in range(1, 6)
    ]
    repository.fetch_payments.return_value = []

    use_case = GetAccountStatementUseCase(
        ledger_repository=repository,
        logger=MagicMock(),
    )

    result = use_case.execute(_customer("5"), PageRequest(page=2, limit=2))

    assert [entry.id for entry in result.entries] == ["i3", "i2"]
    assert result.total_count == 5
    assert result.has_more is True


def test_execute_warns_about_skipped_rows() -> None:
    """Skipped rows should be reported through the logger."""
    repository = MagicMock()
    repository.fetch_invoices.return_value = [
        InvoiceRecord(
            id="broken",
            invoice_number="1",
            created_at=None,
            time=None,
            total_amount="10",
        )
    ]
    repository.fetch_payments.return_value = []
    logger = MagicMock()

    use_case = GetAccountStatementUseCase(
        ledger_repository=repository,
        logger=logger,
    )

    result = use_case.execute(_customer("0"), PageRequest(page=1, limit=5))

    assert result.skipped_count == 1
    assert result.entries == []
    assert any(
        "Skipped 1 malformed" in call.args[0]
        for call in logger.warning.call_args_list
    )
