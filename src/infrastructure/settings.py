"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
import re

import dotenv

from src.domain.constants import (
    DEFAULT_INVOICE_LABEL,
    DEFAULT_PAGE_LIMIT,
    DEFAULT_PAYMENT_LABEL,
)
from src.infrastructure.logging.logger import get_app_logger

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True)
class StatementSettings:
    """Settings for reading and presenting customer statements.

    Attributes:
        db_schema: Schema holding the storefront tables.
        page_limit: Default number of rows per page.
        invoice_label: Description label for invoices without a type.
        payment_label: Description for payments without notes.
    """

    db_schema: str = "public"
    page_limit: int = DEFAULT_PAGE_LIMIT
    invoice_label: str = DEFAULT_INVOICE_LABEL
    payment_label: str = DEFAULT_PAYMENT_LABEL

    @classmethod
    def from_env(cls) -> "StatementSettings":
        """Build settings from environment variables.

        Returns:
            StatementSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        return cls(
            db_schema=cls._parse_schema(
                os.getenv("STORE_DB_SCHEMA"),
                logger=logger,
            ),
            page_limit=cls._parse_page_limit(
                os.getenv("STATEMENT_PAGE_LIMIT"),
                logger=logger,
            ),
            invoice_label=(
                os.getenv("STATEMENT_INVOICE_LABEL", "").strip()
                or DEFAULT_INVOICE_LABEL
            ),
            payment_label=(
                os.getenv("STATEMENT_PAYMENT_LABEL", "").strip()
                or DEFAULT_PAYMENT_LABEL
            ),
        )

    @staticmethod
    def _parse_schema(raw_schema: str | None, logger) -> str:
        """Validate the schema name so it can be inlined in SQL.

        Args:
            raw_schema: Raw schema name.
            logger: Logger used for warnings.

        Returns:
            str: Schema name, or ``public`` when missing or invalid.
        """
        if not raw_schema or not raw_schema.strip():
            return "public"
        schema = raw_schema.strip()
        if not _IDENTIFIER.match(schema):
            logger.warning(
                f"Invalid STORE_DB_SCHEMA '{schema}'. Falling back to public."
            )
            return "public"
        return schema

    @staticmethod
    def _parse_page_limit(raw_limit: str | None, logger) -> int:
        """Parse the default page size.

        Args:
            raw_limit: Raw page size.
            logger: Logger used for warnings.

        Returns:
            int: Positive page size, or the default when invalid.
        """
        if not raw_limit:
            return DEFAULT_PAGE_LIMIT
        try:
            limit = int(raw_limit)
        except ValueError:
            limit = 0
        if limit <= 0:
            logger.warning(
                f"Invalid STATEMENT_PAGE_LIMIT '{raw_limit}'. "
                f"Using {DEFAULT_PAGE_LIMIT}."
            )
            return DEFAULT_PAGE_LIMIT
        return limit


__all__ = ["StatementSettings"]
