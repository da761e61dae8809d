"""Tests for the composition root."""

from unittest.mock import MagicMock

from src.application.use_cases.get_account_statement import (
    GetAccountStatementUseCase,
)
from src.infrastructure import container
from src.infrastructure.customer_ledger_repository import (
    SqlAlchemyCustomerLedgerRepository,
)
from src.infrastructure.settings import StatementSettings


def test_build_ledger_repository_uses_configured_schema() -> None:
    """The repository should be bound to the configured schema."""
    db_port = MagicMock()

    repository = container.build_ledger_repository(
        db_port=db_port,
        settings=StatementSettings(db_schema="storefront"),
    )

    assert isinstance(repository, SqlAlchemyCustomerLedgerRepository)
    assert repository._db_port is db_port
    assert repository._table("sales") == "storefront.sales"


def test_build_statement_use_case_passes_labels(monkeypatch) -> None:
    """The statement use case should receive the configured labels."""
    monkeypatch.setattr(container, "get_app_logger", MagicMock)
    repository = MagicMock()

    use_case = container.build_statement_use_case(
        ledger_repository=repository,
        settings=StatementSettings(
            invoice_label="Sale",
            payment_label="Advance",
        ),
    )

    assert isinstance(use_case, GetAccountStatementUseCase)
    assert use_case._ledger_repository is repository
    assert use_case._invoice_label == "Sale"
    assert use_case._payment_label == "Advance"
