"""SQLAlchemy-backed repository for the storefront customer ledger."""

from collections.abc import Sequence
from datetime import date, timedelta
from decimal import Decimal

from sqlalchemy import bindparam, text

from src.application.ports.customer_ledger_repository import (
    CustomerLedgerRepositoryPort,
)
from src.application.ports.database import DatabaseEnginePort
from src.domain.models import (
    CustomerAccount,
    InvoiceItem,
    InvoiceRecord,
    InvoiceTotalsRow,
    PaymentRecord,
)
from src.utils.decimal_utils import coerce_decimal

CUSTOMER_COLUMNS = """
    id, name, phone, email, address, city, governorate,
    account_balance, loyalty_points, rank, created_at
"""


class SqlAlchemyCustomerLedgerRepository(CustomerLedgerRepositoryPort):
    """Repository backed by SQLAlchemy for customer ledger queries."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        schema: str = "public",
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the storefront engine.
            schema: Validated schema name holding the storefront tables.
        """
        self._db_port = db_port
        self._schema = schema

    def fetch_customer_by_user_id(
        self,
        user_id: str,
    ) -> CustomerAccount | None:
        query = text(
            f"""
            SELECT {CUSTOMER_COLUMNS}
            FROM {self._table("customers")}
            WHERE user_id = :user_id
            LIMIT 1
            """
        )
        engine = self._db_port.get_store_engine()
        with engine.connect() as conn:
            row = conn.execute(query, {"user_id": user_id}).first()
        return self._to_customer(row) if row else None

    def fetch_unlinked_customer_by_email(
        self,
        email: str,
    ) -> CustomerAccount | None:
        query = text(
            f"""
            SELECT {CUSTOMER_COLUMNS}
            FROM {self._table("customers")}
            WHERE email = :email AND user_id IS NULL
            LIMIT 1
            """
        )
        engine = self._db_port.get_store_engine()
        with engine.connect() as conn:
            row = conn.execute(query, {"email": email}).first()
        return self._to_customer(row) if row else None

    def link_customer_to_user(self, customer_id: str, user_id: str) -> None:
        query = text(
            f"""
            UPDATE {self._table("customers")}
            SET user_id = :user_id
            WHERE id = :customer_id
            """
        )
        engine = self._db_port.get_store_engine()
        with engine.begin() as conn:
            conn.execute(
                query,
                {"customer_id": customer_id, "user_id": user_id},
            )

    def fetch_invoices(
        self,
        customer_id: str,
        start_date: date | None,
        end_date: date | None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[InvoiceRecord]:
        sql = f"""
            SELECT s.id, s.invoice_number, s.total_amount, s.tax_amount,
                   s.discount_amount, s.payment_method, s.notes,
                   s.created_at, s.time, s.invoice_type,
                   r.name AS register_name
            FROM {self._table("sales")} s
            LEFT JOIN {self._table("records")} r ON r.id = s.record_id
            WHERE s.customer_id = :customer_id
            """
        sql += self._build_date_filter("s.created_at", start_date, end_date)
        sql += " ORDER BY s.created_at DESC"
        sql += self._build_window(offset, limit)
        params = self._build_params(customer_id, start_date, end_date)
        params.update(self._build_window_params(offset, limit))
        engine = self._db_port.get_store_engine()
        with engine.connect() as conn:
            rows = conn.execute(text(sql), params).all()
        return [
            InvoiceRecord(
                id=str(row.id),
                invoice_number=row.invoice_number,
                created_at=row.created_at,
                time=row.time,
                total_amount=row.total_amount,
                invoice_type=row.invoice_type,
                register_name=row.register_name,
                tax_amount=row.tax_amount,
                discount_amount=row.discount_amount,
                payment_method=row.payment_method,
                notes=row.notes,
            )
            for row in rows
        ]

    def count_invoices(
        self,
        customer_id: str,
        start_date: date | None,
        end_date: date | None,
    ) -> int:
        sql = f"""
            SELECT COUNT(*) AS total
            FROM {self._table("sales")} s
            WHERE s.customer_id = :customer_id
            """
        sql += self._build_date_filter("s.created_at", start_date, end_date)
        return self._scalar_count(
            sql,
            self._build_params(customer_id, start_date, end_date),
        )

    def fetch_invoice_items(
        self,
        sale_ids: Sequence[str],
    ) -> list[InvoiceItem]:
        if not sale_ids:
            return []
        query = text(
            f"""
            SELECT si.id, si.sale_id, si.product_id, si.quantity,
                   si.unit_price, si.discount,
                   pr.name AS product_name, pr.product_code,
                   pr.main_image_url
            FROM {self._table("sale_items")} si
            LEFT JOIN {self._table("products")} pr ON pr.id = si.product_id
            WHERE si.sale_id IN :sale_ids
            ORDER BY si.sale_id, si.id
            """
        ).bindparams(bindparam("sale_ids", expanding=True))
        engine = self._db_port.get_store_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, {"sale_ids": list(sale_ids)}).all()
        return [
            InvoiceItem(
                id=str(row.id),
                sale_id=str(row.sale_id),
                product_id=(
                    str(row.product_id) if row.product_id is not None else None
                ),
                quantity=row.quantity,
                unit_price=row.unit_price,
                discount=row.discount,
                product_name=row.product_name,
                product_code=row.product_code,
                image_url=row.main_image_url,
            )
            for row in rows
        ]

    def fetch_payments(
        self,
        customer_id: str,
        start_date: date | None,
        end_date: date | None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[PaymentRecord]:
        sql = f"""
            SELECT p.id, p.amount, p.payment_method, p.notes,
                   p.payment_date, p.created_at, r.name AS register_name
            FROM {self._table("customer_payments")} p
            LEFT JOIN {self._table("records")} r ON r.id = p.safe_id
            WHERE p.customer_id = :customer_id
            """
        sql += self._build_date_filter("p.created_at", start_date, end_date)
        sql += " ORDER BY p.created_at DESC"
        sql += self._build_window(offset, limit)
        params = self._build_params(customer_id, start_date, end_date)
        params.update(self._build_window_params(offset, limit))
        engine = self._db_port.get_store_engine()
        with engine.connect() as conn:
            rows = conn.execute(text(sql), params).all()
        return [
            PaymentRecord(
                id=str(row.id),
                amount=row.amount,
                payment_date=row.payment_date,
                created_at=row.created_at,
                notes=row.notes,
                register_name=row.register_name,
                payment_method=row.payment_method,
            )
            for row in rows
        ]

    def count_payments(
        self,
        customer_id: str,
        start_date: date | None,
        end_date: date | None,
    ) -> int:
        sql = f"""
            SELECT COUNT(*) AS total
            FROM {self._table("customer_payments")} p
            WHERE p.customer_id = :customer_id
            """
        sql += self._build_date_filter("p.created_at", start_date, end_date)
        return self._scalar_count(
            sql,
            self._build_params(customer_id, start_date, end_date),
        )

    def fetch_invoice_totals(self, customer_id: str) -> InvoiceTotalsRow:
        query = text(
            f"""
            SELECT COUNT(*) AS invoice_count,
                   COALESCE(SUM(total_amount), 0) AS total_amount,
                   MAX(created_at) AS last_created_at
            FROM {self._table("sales")}
            WHERE customer_id = :customer_id
            """
        )
        engine = self._db_port.get_store_engine()
        with engine.connect() as conn:
            row = conn.execute(query, {"customer_id": customer_id}).first()
        if not row:
            return InvoiceTotalsRow(invoice_count=0, total_amount=Decimal("0"))
        return InvoiceTotalsRow(
            invoice_count=int(row.invoice_count or 0),
            total_amount=coerce_decimal(row.total_amount),
            last_created_at=row.last_created_at,
        )

    def fetch_payment_total(self, customer_id: str) -> Decimal:
        query = text(
            f"""
            SELECT COALESCE(SUM(amount), 0) AS total_amount
            FROM {self._table("customer_payments")}
            WHERE customer_id = :customer_id
            """
        )
        engine = self._db_port.get_store_engine()
        with engine.connect() as conn:
            row = conn.execute(query, {"customer_id": customer_id}).first()
        return coerce_decimal(row.total_amount if row else None)

    def _table(self, name: str) -> str:
        return f"{self._schema}.{name}"

    def _scalar_count(self, sql: str, params: dict) -> int:
        engine = self._db_port.get_store_engine()
        with engine.connect() as conn:
            total = conn.execute(text(sql), params).scalar()
        return int(total or 0)

    @staticmethod
    def _to_customer(row) -> CustomerAccount:
        return CustomerAccount(
            id=str(row.id),
            name=row.name,
            account_balance=coerce_decimal(row.account_balance),
            phone=row.phone,
            email=row.email,
            address=row.address,
            city=row.city,
            governorate=row.governorate,
            loyalty_points=row.loyalty_points,
            rank=row.rank,
            created_at=row.created_at,
        )

    @staticmethod
    def _build_date_filter(
        column: str,
        start_date: date | None,
        end_date: date | None,
    ) -> str:
        clauses = ""
        if start_date:
            clauses += f" AND {column} >= :start_date"
        if end_date:
            clauses += f" AND {column} < :end_date_exclusive"
        return clauses

    @staticmethod
    def _build_params(
        customer_id: str,
        start_date: date | None,
        end_date: date | None,
    ) -> dict:
        params: dict = {"customer_id": customer_id}
        if start_date:
            params["start_date"] = start_date
        if end_date:
            params["end_date_exclusive"] = end_date + timedelta(days=1)
        return params

    @staticmethod
    def _build_window(offset: int | None, limit: int | None) -> str:
        window = ""
        if limit is not None:
            window += " LIMIT :limit"
        if offset:
            window += " OFFSET :offset"
        return window

    @staticmethod
    def _build_window_params(offset: int | None, limit: int | None) -> dict:
        params: dict = {}
        if limit is not None:
            params["limit"] = limit
        if offset:
            params["offset"] = offset
        return params


__all__ = ["SqlAlchemyCustomerLedgerRepository"]
