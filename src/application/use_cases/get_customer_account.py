"""Use case to resolve the customer account behind a signed-in user."""

from src.application.ports.customer_ledger_repository import (
    CustomerLedgerRepositoryPort,
)
from src.domain.models import CustomerAccount
from src.infrastructure.logging.logger import get_app_logger


class CustomerNotFoundError(LookupError):
    """Raised when no customer account matches the signed-in user."""


class GetCustomerAccountUseCase:
    """Find the customer linked to a user, linking it by email if needed."""

    def __init__(
        self,
        ledger_repository: CustomerLedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing customer data.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        email: str | None = None,
    ) -> CustomerAccount:
        """Return the customer account of a user.

        A customer registered in the shop with the user's email but not yet
        linked to any user is linked on first access.

        Args:
            user_id: Identifier of the signed-in user.
            email: Email of the signed-in user, when known.

        Returns:
            CustomerAccount: The resolved customer.

        Raises:
            CustomerNotFoundError: If no customer matches the user.
        """
        customer = self._ledger_repository.fetch_customer_by_user_id(user_id)
        if customer is not None:
            return customer
        if email:
            customer = self._ledger_repository.fetch_unlinked_customer_by_email(
                email
            )
            if customer is not None:
                self._ledger_repository.link_customer_to_user(
                    customer.id,
                    user_id,
                )
                self._logger.info(
                    f"Linked customer {customer.id} to user {user_id}"
                )
                return customer
        self._logger.warning(f"No customer account found for user {user_id}")
        raise CustomerNotFoundError(
            "Customer account not found. Please contact support."
        )


__all__ = ["GetCustomerAccountUseCase", "CustomerNotFoundError"]
