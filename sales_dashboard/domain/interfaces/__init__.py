"""Domain Interfaces - Abstract contracts for infrastructure."""

from .repositories import TransactionRepository
from .clients import TransactionsClient

__all__ = [
    "TransactionRepository",
    "TransactionsClient",
]
