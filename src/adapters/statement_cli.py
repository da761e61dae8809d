"""CLI adapter printing a customer's account statement."""

from datetime import date
import json
import os

from src.application.use_cases.get_customer_account import (
    CustomerNotFoundError,
    GetCustomerAccountUseCase,
)
from src.application.use_cases.get_customer_statistics import (
    GetCustomerStatisticsUseCase,
)
from src.domain.models import PageRequest
from src.domain.services.serialization import (
    statement_page_to_payload,
    statistics_to_payload,
)
from src.infrastructure.container import (
    build_ledger_repository,
    build_statement_use_case,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import StatementSettings


def _parse_date(value: str | None) -> date | None:
    """Parse an optional ISO date string.

    Args:
        value: Date string in YYYY-MM-DD format, or an empty value.

    Returns:
        date | None: Parsed date, or None when no date was given.

    Raises:
        ValueError: If a value was given but is not a valid date.
    """
    if not value or not value.strip():
        return None
    return date.fromisoformat(value.strip())


def _parse_positive_int(value: str | None, default: int, logger) -> int:
    """Parse a positive integer, falling back to a default."""
    if not value:
        return default
    try:
        parsed = int(value)
    except ValueError:
        parsed = 0
    if parsed <= 0:
        logger.warning(f"Invalid value '{value}'. Using {default}.")
        return default
    return parsed


def main() -> None:
    """Print one page of the statement of the configured customer."""
    logger = get_app_logger()
    settings = StatementSettings.from_env()
    user_id = os.getenv("STATEMENT_USER_ID")
    if not user_id:
        logger.warning("STATEMENT_USER_ID is required to print a statement.")
        return

    page_request = PageRequest(
        page=_parse_positive_int(os.getenv("STATEMENT_PAGE"), 1, logger),
        limit=_parse_positive_int(
            os.getenv("STATEMENT_LIMIT"),
            settings.page_limit,
            logger,
        ),
    )
    try:
        start_date = _parse_date(os.getenv("STATEMENT_START_DATE"))
        end_date = _parse_date(os.getenv("STATEMENT_END_DATE"))
    except ValueError as exc:
        logger.error(
            f"Invalid statement date range. Expected YYYY-MM-DD: {exc}"
        )
        return
    output_format = os.getenv("STATEMENT_FORMAT", "text").strip().lower()

    repository = build_ledger_repository(settings=settings)
    try:
        customer = GetCustomerAccountUseCase(
            ledger_repository=repository,
            logger=logger,
        ).execute(user_id, email=os.getenv("STATEMENT_EMAIL"))
    except CustomerNotFoundError as exc:
        logger.error(str(exc))
        return

    statement = build_statement_use_case(
        ledger_repository=repository,
        settings=settings,
    ).execute(
        customer,
        page_request,
        start_date=start_date,
        end_date=end_date,
    )
    stats = GetCustomerStatisticsUseCase(
        ledger_repository=repository,
        logger=logger,
    ).execute(customer.id)

    if output_format == "json":
        payload = statement_page_to_payload(statement)
        payload["statistics"] = statistics_to_payload(stats)
        payload["pagination"] = {
            "page": page_request.page,
            "limit": page_request.limit,
            "total": statement.total_count,
            "hasMore": statement.has_more,
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    print(
        f"Statement for {customer.name} "
        f"(balance={customer.account_balance}, page={page_request.page}, "
        f"start={start_date}, end={end_date})"
    )
    for entry in statement.entries:
        when = entry.date.isoformat()
        if entry.time:
            when += f" {entry.time.strftime('%H:%M')}"
        print(
            f"{when} | {entry.description} | "
            f"invoice={entry.invoice_value} | paid={entry.paid_amount} | "
            f"balance={entry.running_balance}"
        )
    print(
        f"Showing {len(statement.entries)} of {statement.total_count} "
        f"entries (more={statement.has_more}, "
        f"skipped={statement.skipped_count})"
    )
    print(
        f"Invoices: {stats.total_invoices} totalling "
        f"{stats.total_invoices_amount}, payments: {stats.total_payments}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
