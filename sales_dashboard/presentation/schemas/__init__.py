"""Pydantic schemas for API request/response validation."""

from .transaction import TransactionSchema
from .error import ErrorResponseSchema

__all__ = [
    "TransactionSchema",
    "ErrorResponseSchema",
]
