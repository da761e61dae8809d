"""Streamlit back-office page for customer account statements."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import streamlit as st
import altair as alt

from src.application.use_cases.get_customer_account import (
    CustomerNotFoundError,
    GetCustomerAccountUseCase,
)
from src.application.use_cases.get_customer_statistics import (
    GetCustomerStatisticsUseCase,
)
from src.application.use_cases.list_customer_records import (
    ListCustomerInvoicesUseCase,
    ListCustomerPaymentsUseCase,
)
from src.domain.models import (
    CustomerAccount,
    CustomerStatistics,
    InvoiceItem,
    InvoiceRecord,
    PageRequest,
    PaymentRecord,
    RecordPage,
    StatementEntry,
    StatementPage,
    TransactionKind,
)
from src.infrastructure.container import (
    build_ledger_repository,
    build_statement_use_case,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import StatementSettings
from src.utils.decimal_utils import parse_decimal

KIND_LABELS = {
    TransactionKind.INVOICE: "Invoice",
    TransactionKind.PAYMENT: "Payment",
}
MAX_PAGE_LIMIT = 200


def _fetch_customer(user_id: str, email: str | None) -> CustomerAccount:
    """Resolve the customer behind a user id (and email)."""
    use_case = GetCustomerAccountUseCase(
        ledger_repository=build_ledger_repository()
    )
    return use_case.execute(user_id, email=email)


def _fetch_statement(
    customer: CustomerAccount,
    page: int,
    limit: int,
    start_date: date | None,
    end_date: date | None,
) -> StatementPage:
    """Fetch one statement page for the customer."""
    use_case = build_statement_use_case()
    return use_case.execute(
        customer,
        PageRequest(page=page, limit=limit),
        start_date=start_date,
        end_date=end_date,
    )


@st.cache_data(show_spinner=False)
def _load_statement(
    customer: CustomerAccount,
    page: int,
    limit: int,
    start_date: date | None,
    end_date: date | None,
) -> StatementPage:
    """Cached wrapper around _fetch_statement."""
    return _fetch_statement(customer, page, limit, start_date, end_date)


def _fetch_invoices(
    customer_id: str,
    page: int,
    limit: int,
    start_date: date | None,
    end_date: date | None,
) -> RecordPage[InvoiceRecord]:
    """Fetch one page of the customer's invoices."""
    use_case = ListCustomerInvoicesUseCase(
        ledger_repository=build_ledger_repository()
    )
    return use_case.execute(
        customer_id,
        PageRequest(page=page, limit=limit),
        start_date=start_date,
        end_date=end_date,
    )


def _fetch_payments(
    customer_id: str,
    page: int,
    limit: int,
    start_date: date | None,
    end_date: date | None,
) -> RecordPage[PaymentRecord]:
    """Fetch one page of the customer's payments."""
    use_case = ListCustomerPaymentsUseCase(
        ledger_repository=build_ledger_repository()
    )
    return use_case.execute(
        customer_id,
        PageRequest(page=page, limit=limit),
        start_date=start_date,
        end_date=end_date,
    )


def _fetch_statistics(customer_id: str) -> CustomerStatistics:
    """Fetch lifetime statistics of the customer."""
    use_case = GetCustomerStatisticsUseCase(
        ledger_repository=build_ledger_repository()
    )
    return use_case.execute(customer_id)


def _format_amount(value: Decimal) -> str:
    """Format amounts for display."""
    return f"{value:,.2f}"


def _statement_rows(entries: Sequence[StatementEntry]) -> list[dict]:
    """Build dataframe rows for statement entries."""
    return [
        {
            "Date": entry.date.isoformat(),
            "Time": entry.time.strftime("%H:%M") if entry.time else "-",
            "Type": KIND_LABELS[entry.kind],
            "Description": entry.description,
            "Invoice": _format_amount(entry.invoice_value),
            "Paid": _format_amount(entry.paid_amount),
            "Balance": _format_amount(entry.running_balance),
            "Register": entry.register_name or "-",
        }
        for entry in entries
    ]


def _optional_amount(value) -> str:
    """Format a raw amount, or a dash when missing or unreadable."""
    parsed = parse_decimal(value)
    if parsed is None:
        return "-"
    return _format_amount(parsed)


def _invoice_rows(items: Sequence[InvoiceRecord]) -> list[dict]:
    """Build dataframe rows for invoices."""
    return [
        {
            "Number": item.invoice_number or item.id,
            "Created": str(item.created_at),
            "Type": item.invoice_type or "-",
            "Total": _optional_amount(item.total_amount),
            "Tax": _optional_amount(item.tax_amount),
            "Discount": _optional_amount(item.discount_amount),
            "Payment method": item.payment_method or "-",
            "Items": len(item.items),
            "Notes": item.notes or "-",
            "Register": item.register_name or "-",
        }
        for item in items
    ]


def _invoice_item_rows(items: Sequence[InvoiceItem]) -> list[dict]:
    """Build dataframe rows for the product lines of one invoice."""
    return [
        {
            "#": index,
            "Product": item.product_name or "Product",
            "Code": item.product_code or "-",
            "Quantity": str(item.quantity),
            "Unit price": _optional_amount(item.unit_price),
            "Discount": _optional_amount(item.discount),
            "Total": _format_amount(item.line_total),
        }
        for index, item in enumerate(items, start=1)
    ]


def _payment_rows(items: Sequence[PaymentRecord]) -> list[dict]:
    """Build dataframe rows for payments."""
    return [
        {
            "Date": str(item.payment_date or item.created_at),
            "Amount": _optional_amount(item.amount),
            "Method": item.payment_method or "Cash",
            "Notes": item.notes or "-",
            "Safe": item.register_name or "-",
        }
        for item in items
    ]


def _prepare_balance_chart_data(
    entries: Sequence[StatementEntry],
) -> list[dict[str, str | float]]:
    """Prepare oldest-first running balance points for Altair.

    Args:
        entries: Statement entries, most recent first.

    Returns:
        Altair-ready chart data.
    """
    data: list[dict[str, str | float]] = []
    for entry in reversed(entries):
        moment = entry.date.isoformat()
        if entry.time:
            moment += f"T{entry.time.strftime('%H:%M:%S')}"
        data.append(
            {
                "moment": moment,
                "balance": float(entry.running_balance),
                "balance_label": _format_amount(entry.running_balance),
                "description": entry.description,
            }
        )
    return data


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that the numpy/pandas builds Altair relies on are usable.

    Returns:
        tuple[bool, str | None]: Status flag and an error message.
    """
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Chart dependencies are unavailable: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "numpy import is incomplete (missing ndarray)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas import is incomplete (missing Timestamp)."
    return True, None


def _render_balance_chart(entries: Sequence[StatementEntry]) -> None:
    """Render the running balance as a step line."""
    if not entries:
        st.info("No transactions to chart.")
        return
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        return
    data = _prepare_balance_chart_data(entries)
    chart = alt.Chart(alt.Data(values=data)).mark_line(
        interpolate="step-after",
        point=True,
    ).encode(
        x=alt.X("moment:T", title=None),
        y=alt.Y("balance:Q", title="Balance"),
        tooltip=[
            alt.Tooltip("moment:T"),
            alt.Tooltip("description:N"),
            alt.Tooltip("balance_label:N"),
        ],
    ).properties(height=260)
    st.altair_chart(chart, width="stretch")


def _render_statistics(
    customer: CustomerAccount,
    stats: CustomerStatistics,
) -> None:
    """Render the balance and lifetime figures."""
    balance_col, invoices_col, paid_col, average_col = st.columns(4)
    balance_col.metric("Balance", _format_amount(customer.account_balance))
    invoices_col.metric(
        f"Invoices ({stats.total_invoices})",
        _format_amount(stats.total_invoices_amount),
    )
    paid_col.metric("Payments", _format_amount(stats.total_payments))
    average_col.metric(
        "Average order",
        _format_amount(stats.average_order_value),
    )
    if stats.last_invoice_date:
        st.caption(f"Last invoice on {stats.last_invoice_date.isoformat()}")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Customer Statements", layout="wide")
    st.title("Customer Statements")

    user_id = st.sidebar.text_input("User ID").strip()
    email = st.sidebar.text_input("Email").strip() or None
    start_date = st.sidebar.date_input("From", value=None)
    end_date = st.sidebar.date_input("To", value=None)
    settings = StatementSettings.from_env()
    limit = int(
        st.sidebar.number_input(
            "Rows per page",
            1,
            MAX_PAGE_LIMIT,
            min(settings.page_limit, MAX_PAGE_LIMIT),
        )
    )
    page = int(st.sidebar.number_input("Page", 1, 10_000, 1))

    if not user_id:
        st.info("Enter a user ID to load a statement.")
        return

    try:
        customer = _fetch_customer(user_id, email)
    except CustomerNotFoundError as exc:
        st.warning(str(exc))
        return
    get_usage_logger().info(
        f"Statement viewed for customer {customer.id} "
        f"(page={page}, limit={limit}, start={start_date}, end={end_date})"
    )

    st.subheader(customer.name)
    _render_statistics(customer, _fetch_statistics(customer.id))

    statement_tab, invoices_tab, payments_tab = st.tabs(
        ["Statement", "Invoices", "Payments"]
    )
    with statement_tab:
        statement = _load_statement(customer, page, limit, start_date, end_date)
        st.caption(
            f"{len(statement.entries)} of {statement.total_count} entries"
        )
        if statement.skipped_count:
            st.warning(
                f"{statement.skipped_count} malformed records were left out."
            )
        _render_balance_chart(statement.entries)
        st.dataframe(
            _statement_rows(statement.entries),
            width="stretch",
            hide_index=True,
        )
    with invoices_tab:
        invoices = _fetch_invoices(customer.id, page, limit, start_date, end_date)
        st.caption(f"{invoices.total_count} invoices")
        st.dataframe(
            _invoice_rows(invoices.items),
            width="stretch",
            hide_index=True,
        )
        for invoice in invoices.items:
            if not invoice.items:
                continue
            label = invoice.invoice_number or invoice.id
            with st.expander(f"Items of {label} ({len(invoice.items)})"):
                st.dataframe(
                    _invoice_item_rows(invoice.items),
                    width="stretch",
                    hide_index=True,
                )
    with payments_tab:
        payments = _fetch_payments(customer.id, page, limit, start_date, end_date)
        st.caption(f"{payments.total_count} payments")
        st.dataframe(
            _payment_rows(payments.items),
            width="stretch",
            hide_index=True,
        )


if __name__ == "__main__":  # pragma: no cover
    main()
