"""Composition root for wiring infrastructure adapters."""

from src.application.ports.customer_ledger_repository import (
    CustomerLedgerRepositoryPort,
)
from src.application.ports.database import DatabaseEnginePort
from src.application.use_cases.get_account_statement import (
    GetAccountStatementUseCase,
)
from src.infrastructure.customer_ledger_repository import (
    SqlAlchemyCustomerLedgerRepository,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import StatementSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: StatementSettings | None = None,
) -> CustomerLedgerRepositoryPort:
    """Return the customer ledger repository for the configured schema."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or StatementSettings.from_env()
    return SqlAlchemyCustomerLedgerRepository(
        resolved_db,
        schema=resolved_settings.db_schema,
    )


def build_statement_use_case(
    ledger_repository: CustomerLedgerRepositoryPort | None = None,
    settings: StatementSettings | None = None,
) -> GetAccountStatementUseCase:
    """Return the statement use case with configured labels."""
    resolved_settings = settings or StatementSettings.from_env()
    resolved_repository = ledger_repository or build_ledger_repository(
        settings=resolved_settings
    )
    return GetAccountStatementUseCase(
        ledger_repository=resolved_repository,
        logger=get_app_logger(),
        invoice_label=resolved_settings.invoice_label,
        payment_label=resolved_settings.payment_label,
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_statement_use_case",
]
