"""Use case to build a customer's account statement."""

from datetime import date

from src.application.ports.customer_ledger_repository import (
    CustomerLedgerRepositoryPort,
)
from src.domain.constants import DEFAULT_INVOICE_LABEL, DEFAULT_PAYMENT_LABEL
from src.domain.models import CustomerAccount, PageRequest, StatementPage
from src.domain.services.statement import build_statement
from src.infrastructure.logging.logger import get_app_logger


class GetAccountStatementUseCase:
    """Merge invoices and payments into a statement with running balances."""

    def __init__(
        self,
        ledger_repository: CustomerLedgerRepositoryPort,
        logger=None,
        invoice_label: str = DEFAULT_INVOICE_LABEL,
        payment_label: str = DEFAULT_PAYMENT_LABEL,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing invoices and payments.
            logger: Optional logger compatible with logging.Logger-like API.
            invoice_label: Description label for invoices without a type.
            payment_label: Description for payments without notes.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._invoice_label = invoice_label
        self._payment_label = payment_label

    def execute(
        self,
        customer: CustomerAccount,
        page_request: PageRequest,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> StatementPage:
        """Return one page of the customer's statement, newest first.

        Args:
            customer: Customer whose current balance anchors the statement.
            page_request: Page number and size.
            start_date: Optional lower bound on transaction dates.
            end_date: Optional upper bound (inclusive) on transaction dates.

        Returns:
            StatementPage: Entries of the page with running balances.
        """
        invoices = self._ledger_repository.fetch_invoices(
            customer.id,
            start_date,
            end_date,
        )
        payments = self._ledger_repository.fetch_payments(
            customer.id,
            start_date,
            end_date,
        )
        self._logger.info(
            f"Fetched {len(invoices)} invoices and {len(payments)} payments "
            f"for customer {customer.id}"
        )
        page = build_statement(
            invoices,
            payments,
            customer.account_balance,
            offset=page_request.offset,
            limit=page_request.limit,
            invoice_label=self._invoice_label,
            payment_label=self._payment_label,
            logger=self._logger,
        )
        if page.skipped_count:
            self._logger.warning(
                f"Skipped {page.skipped_count} malformed records on the "
                f"statement of customer {customer.id}"
            )
        return page


__all__ = ["GetAccountStatementUseCase", "StatementPage"]
