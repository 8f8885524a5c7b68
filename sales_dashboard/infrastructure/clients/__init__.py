"""External API client implementations."""

from .transactions_client import HttpTransactionsClient

__all__ = [
    "HttpTransactionsClient",
]
