"""Domain models for storefront customers."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class CustomerAccount:
    """Customer profile with its current balance snapshot."""

    id: str
    name: str
    account_balance: Decimal
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    city: str | None = None
    governorate: str | None = None
    loyalty_points: int | None = None
    rank: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class CustomerStatistics:
    """Lifetime invoice and payment figures for a customer."""

    total_invoices: int
    total_invoices_amount: Decimal
    total_payments: Decimal
    last_invoice_date: date | None = None

    @property
    def average_order_value(self) -> Decimal:
        """Return the mean invoice amount, or zero without invoices."""
        if self.total_invoices <= 0:
            return Decimal("0")
        return self.total_invoices_amount / self.total_invoices


__all__ = ["CustomerAccount", "CustomerStatistics"]
