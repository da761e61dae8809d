"""Domain models for raw invoice and payment rows.

Amounts and dates are kept exactly as the data source returned them; the
statement services parse them and skip the rows they cannot use.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal

from src.utils.decimal_utils import parse_decimal

RawAmount = Decimal | int | float | str | None
RawDate = date | datetime | str | None
RawTime = time | str | None


@dataclass(frozen=True)
class InvoiceItem:
    """Product line of a sale.

    Attributes:
        id: Sale item identifier.
        sale_id: Identifier of the sale the line belongs to.
        product_id: Identifier of the sold product.
        quantity: Sold quantity.
        unit_price: Price per unit.
        discount: Discount granted on the line, when any.
        product_name: Product name, when the product still exists.
        product_code: Product code, when set.
        image_url: Main product image, when set.
    """

    id: str
    sale_id: str
    product_id: str | None
    quantity: RawAmount
    unit_price: RawAmount
    discount: RawAmount = None
    product_name: str | None = None
    product_code: str | None = None
    image_url: str | None = None

    @property
    def line_total(self) -> Decimal:
        """Return unit price times quantity, counting unusable values as 0."""
        unit_price = parse_decimal(self.unit_price) or Decimal("0")
        quantity = parse_decimal(self.quantity) or Decimal("0")
        return unit_price * quantity


@dataclass(frozen=True)
class InvoiceRecord:
    """Completed sale attributable to a customer.

    Attributes:
        id: Sale identifier.
        invoice_number: Human readable invoice number.
        created_at: Creation timestamp or date of the sale.
        time: Recorded time of day of the sale, when captured.
        total_amount: Invoice total, expected to be non-negative.
        invoice_type: Invoice type label, when set.
        register_name: Name of the register the sale was recorded on.
        tax_amount: Tax included in the total, when recorded.
        discount_amount: Discount granted on the whole invoice.
        payment_method: How the invoice was paid.
        notes: Free text notes entered with the sale.
        items: Line items of the sale, when loaded.
    """

    id: str
    invoice_number: str | None
    created_at: RawDate
    time: RawTime
    total_amount: RawAmount
    invoice_type: str | None = None
    register_name: str | None = None
    tax_amount: RawAmount = None
    discount_amount: RawAmount = None
    payment_method: str | None = None
    notes: str | None = None
    items: tuple[InvoiceItem, ...] = ()


@dataclass(frozen=True)
class PaymentRecord:
    """Money received from a customer.

    Attributes:
        id: Payment identifier.
        amount: Amount received, expected to be non-negative.
        payment_date: Business date of the payment, when set.
        created_at: Creation timestamp; its date backs up payment_date and
            its time of day is used as the payment time.
        notes: Free text notes entered with the payment.
        payment_method: How the payment was made, when recorded.
        register_name: Name of the safe the payment was recorded into.
    """

    id: str
    amount: RawAmount
    payment_date: RawDate
    created_at: RawDate
    notes: str | None = None
    register_name: str | None = None
    payment_method: str | None = None


@dataclass(frozen=True)
class InvoiceTotalsRow:
    """Aggregate of all invoices of a customer."""

    invoice_count: int
    total_amount: RawAmount
    last_created_at: RawDate = None


__all__ = [
    "InvoiceItem",
    "InvoiceRecord",
    "PaymentRecord",
    "InvoiceTotalsRow",
    "RawAmount",
    "RawDate",
    "RawTime",
]
