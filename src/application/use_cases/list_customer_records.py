"""Use cases to list a customer's invoices and payments page by page."""

from collections import defaultdict
from dataclasses import replace
from datetime import date

from src.application.ports.customer_ledger_repository import (
    CustomerLedgerRepositoryPort,
)
from src.domain.models import (
    InvoiceItem,
    InvoiceRecord,
    PageRequest,
    PaymentRecord,
    RecordPage,
)
from src.infrastructure.logging.logger import get_app_logger


class ListCustomerInvoicesUseCase:
    """Return a page of a customer's invoices with their product lines."""

    def __init__(
        self,
        ledger_repository: CustomerLedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        customer_id: str,
        page_request: PageRequest,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> RecordPage[InvoiceRecord]:
        invoices = self._ledger_repository.fetch_invoices(
            customer_id,
            start_date,
            end_date,
            offset=page_request.offset,
            limit=page_request.limit,
        )
        total = self._ledger_repository.count_invoices(
            customer_id,
            start_date,
            end_date,
        )
        invoices = self._attach_items(invoices)
        self._logger.info(
            f"Fetched {len(invoices)}/{total} invoices "
            f"for customer {customer_id}"
        )
        return RecordPage(
            items=invoices,
            total_count=total,
            has_more=total > page_request.offset + page_request.limit,
        )

    def _attach_items(
        self,
        invoices: list[InvoiceRecord],
    ) -> list[InvoiceRecord]:
        if not invoices:
            return invoices
        lines = self._ledger_repository.fetch_invoice_items(
            [invoice.id for invoice in invoices]
        )
        by_sale: dict[str, list[InvoiceItem]] = defaultdict(list)
        for line in lines:
            by_sale[line.sale_id].append(line)
        return [
            replace(invoice, items=tuple(by_sale.get(invoice.id, ())))
            for invoice in invoices
        ]


class ListCustomerPaymentsUseCase:
    """Return a page of a customer's payments, newest first."""

    def __init__(
        self,
        ledger_repository: CustomerLedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        customer_id: str,
        page_request: PageRequest,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> RecordPage[PaymentRecord]:
        items = self._ledger_repository.fetch_payments(
            customer_id,
            start_date,
            end_date,
            offset=page_request.offset,
            limit=page_request.limit,
        )
        total = self._ledger_repository.count_payments(
            customer_id,
            start_date,
            end_date,
        )
        self._logger.info(
            f"Fetched {len(items)}/{total} payments for customer {customer_id}"
        )
        return RecordPage(
            items=items,
            total_count=total,
            has_more=total > page_request.offset + page_request.limit,
        )


__all__ = ["ListCustomerInvoicesUseCase", "ListCustomerPaymentsUseCase"]
