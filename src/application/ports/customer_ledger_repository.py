"""Port for reading customers, invoices and payments."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal
from typing import Protocol

from src.domain.models import (
    CustomerAccount,
    InvoiceItem,
    InvoiceRecord,
    InvoiceTotalsRow,
    PaymentRecord,
)


class CustomerLedgerRepositoryPort(Protocol):
    """Port exposing the customer ledger stored by the storefront."""

    def fetch_customer_by_user_id(
        self,
        user_id: str,
    ) -> CustomerAccount | None:
        """Return the customer linked to a user account."""

    def fetch_unlinked_customer_by_email(
        self,
        email: str,
    ) -> CustomerAccount | None:
        """Return the customer with this email and no linked user."""

    def link_customer_to_user(self, customer_id: str, user_id: str) -> None:
        """Link a customer to a user account."""

    def fetch_invoices(
        self,
        customer_id: str,
        start_date: date | None,
        end_date: date | None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[InvoiceRecord]:
        """Return invoices of a customer, newest first."""

    def count_invoices(
        self,
        customer_id: str,
        start_date: date | None,
        end_date: date | None,
    ) -> int:
        """Return how many invoices match the filters."""

    def fetch_invoice_items(
        self,
        sale_ids: Sequence[str],
    ) -> list[InvoiceItem]:
        """Return the product lines of the given sales."""

    def fetch_payments(
        self,
        customer_id: str,
        start_date: date | None,
        end_date: date | None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[PaymentRecord]:
        """Return payments of a customer, newest first."""

    def count_payments(
        self,
        customer_id: str,
        start_date: date | None,
        end_date: date | None,
    ) -> int:
        """Return how many payments match the filters."""

    def fetch_invoice_totals(self, customer_id: str) -> InvoiceTotalsRow:
        """Return lifetime invoice aggregates of a customer."""

    def fetch_payment_total(self, customer_id: str) -> Decimal:
        """Return the lifetime payment amount of a customer."""


__all__ = ["CustomerLedgerRepositoryPort"]
