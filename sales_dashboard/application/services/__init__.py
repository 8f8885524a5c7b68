"""Application services - use case orchestration."""

from .transaction_service import TransactionService, parse_month

__all__ = [
    "TransactionService",
    "parse_month",
]
