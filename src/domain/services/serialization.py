"""Domain helpers mapping statement models to JSON-ready payloads."""

from datetime import date, time
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from src.domain.models.customers import CustomerStatistics
from src.domain.models.statement import StatementEntry, StatementPage

CENTS = Decimal("0.01")


def statement_entry_to_payload(entry: StatementEntry) -> dict[str, Any]:
    """Return the camelCase payload of a statement entry."""
    return {
        "id": entry.id,
        "date": _format_date(entry.date),
        "time": _format_time(entry.time),
        "kind": entry.kind.value,
        "description": entry.description,
        "invoiceValue": _format_decimal(entry.invoice_value),
        "paidAmount": _format_decimal(entry.paid_amount),
        "runningBalance": _format_decimal(entry.running_balance),
        "registerName": entry.register_name,
    }


def statement_page_to_payload(page: StatementPage) -> dict[str, Any]:
    """Return the ``{entries, totalCount, hasMore}`` payload of a page.

    Decimals are rendered as strings so no precision is lost in JSON.
    """
    return {
        "entries": [statement_entry_to_payload(item) for item in page.entries],
        "totalCount": page.total_count,
        "hasMore": page.has_more,
        "skippedCount": page.skipped_count,
    }


def statistics_to_payload(stats: CustomerStatistics) -> dict[str, Any]:
    """Return the camelCase payload of customer statistics."""
    return {
        "totalInvoices": stats.total_invoices,
        "totalInvoicesAmount": _format_decimal(stats.total_invoices_amount),
        "totalPayments": _format_decimal(stats.total_payments),
        "averageOrderValue": _format_decimal(
            stats.average_order_value.quantize(CENTS, rounding=ROUND_HALF_UP)
        ),
        "lastInvoiceDate": _format_date(stats.last_invoice_date),
    }


def _format_decimal(value: Decimal) -> str:
    return str(value)


def _format_date(value: date | None) -> str | None:
    return value.isoformat() if value else None


def _format_time(value: time | None) -> str | None:
    if value is None:
        return None
    if value.second or value.microsecond:
        return value.strftime("%H:%M:%S")
    return value.strftime("%H:%M")


__all__ = [
    "statement_entry_to_payload",
    "statement_page_to_payload",
    "statistics_to_payload",
]
