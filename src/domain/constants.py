"""Domain constants for customer statements."""

DEFAULT_INVOICE_LABEL = "Sales invoice"
DEFAULT_PAYMENT_LABEL = "Payment"

DEFAULT_PAGE_LIMIT = 20


__all__ = [
    "DEFAULT_INVOICE_LABEL",
    "DEFAULT_PAYMENT_LABEL",
    "DEFAULT_PAGE_LIMIT",
]
