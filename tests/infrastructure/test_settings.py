"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import StatementSettings


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", MagicMock)
    for name in (
        "STORE_DB_SCHEMA",
        "STATEMENT_PAGE_LIMIT",
        "STATEMENT_INVOICE_LABEL",
        "STATEMENT_PAYMENT_LABEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_env_uses_defaults() -> None:
    """Missing variables should fall back to defaults."""
    settings = StatementSettings.from_env()

    assert settings == StatementSettings()
    assert settings.db_schema == "public"
    assert settings.page_limit == 20


def test_from_env_reads_values(monkeypatch) -> None:
    """Configured values should be used."""
    monkeypatch.setenv("STORE_DB_SCHEMA", "storefront")
    monkeypatch.setenv("STATEMENT_PAGE_LIMIT", "50")
    monkeypatch.setenv("STATEMENT_INVOICE_LABEL", "Sale")
    monkeypatch.setenv("STATEMENT_PAYMENT_LABEL", "Advance")

    settings = StatementSettings.from_env()

    assert settings.db_schema == "storefront"
    assert settings.page_limit == 50
    assert settings.invoice_label == "Sale"
    assert settings.payment_label == "Advance"


def test_from_env_rejects_unsafe_schema(monkeypatch) -> None:
    """Schema names that are not plain identifiers should be ignored."""
    monkeypatch.setenv("STORE_DB_SCHEMA", "public; DROP TABLE sales")

    assert StatementSettings.from_env().db_schema == "public"


@pytest.mark.parametrize("raw_limit", ["abc", "0", "-3"])
def test_from_env_rejects_invalid_page_limit(monkeypatch, raw_limit) -> None:
    """Invalid page sizes should fall back to the default with a warning."""
    logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    monkeypatch.setenv("STATEMENT_PAGE_LIMIT", raw_limit)

    assert StatementSettings.from_env().page_limit == 20
    logger.warning.assert_called_once()
