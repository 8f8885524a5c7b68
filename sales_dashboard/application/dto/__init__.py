"""Data Transfer Objects for application layer."""

from .transaction import TransactionResponse

__all__ = [
    "TransactionResponse",
]
