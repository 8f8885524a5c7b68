"""Dashboard client-related domain exceptions."""

from .base import DomainException


class TransactionsFetchException(DomainException):
    """Raised when the transactions API cannot be reached or errors out."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(
            message=message,
            code="TRANSACTIONS_FETCH_ERROR",
        )
        self.status_code = status_code
