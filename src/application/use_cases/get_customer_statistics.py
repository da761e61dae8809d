"""Use case to compute lifetime statistics of a customer."""

from src.application.ports.customer_ledger_repository import (
    CustomerLedgerRepositoryPort,
)
from src.domain.models import CustomerStatistics
from src.domain.services.parsing import parse_date
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class GetCustomerStatisticsUseCase:
    """Summarize a customer's invoices and payments over all time."""

    def __init__(
        self,
        ledger_repository: CustomerLedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing invoice and payment aggregates.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, customer_id: str) -> CustomerStatistics:
        """Return invoice count and totals, payment total and last invoice.

        Args:
            customer_id: Customer identifier.

        Returns:
            CustomerStatistics: Lifetime figures for the customer.
        """
        invoices = self._ledger_repository.fetch_invoice_totals(customer_id)
        payments_total = self._ledger_repository.fetch_payment_total(
            customer_id
        )
        stats = CustomerStatistics(
            total_invoices=invoices.invoice_count or 0,
            total_invoices_amount=coerce_decimal(invoices.total_amount),
            total_payments=coerce_decimal(payments_total),
            last_invoice_date=parse_date(invoices.last_created_at),
        )
        self._logger.info(
            f"Statistics for customer {customer_id}: "
            f"invoices={stats.total_invoices}, "
            f"invoiced={stats.total_invoices_amount}, "
            f"paid={stats.total_payments}"
        )
        return stats


__all__ = ["GetCustomerStatisticsUseCase", "CustomerStatistics"]
