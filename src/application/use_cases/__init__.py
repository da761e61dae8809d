"""Application use cases package."""

from .get_account_statement import GetAccountStatementUseCase, StatementPage
from .get_customer_account import (
    CustomerNotFoundError,
    GetCustomerAccountUseCase,
)
from .get_customer_statistics import (
    CustomerStatistics,
    GetCustomerStatisticsUseCase,
)
from .list_customer_records import (
    ListCustomerInvoicesUseCase,
    ListCustomerPaymentsUseCase,
)

__all__ = [
    "GetAccountStatementUseCase",
    "StatementPage",
    "CustomerNotFoundError",
    "GetCustomerAccountUseCase",
    "CustomerStatistics",
    "GetCustomerStatisticsUseCase",
    "ListCustomerInvoicesUseCase",
    "ListCustomerPaymentsUseCase",
]
