"""Domain Exceptions - Data errors and upstream failures."""

from .base import DomainException
from .store import (
    InvalidTransactionRecordException,
    RecordStoreLoadException,
)
from .dashboard import TransactionsFetchException

__all__ = [
    "DomainException",
    "InvalidTransactionRecordException",
    "RecordStoreLoadException",
    "TransactionsFetchException",
]
