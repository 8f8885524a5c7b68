"""Domain Entities - Core business objects."""

from .statistics import (
    PriceHistogram,
    PriceRange,
    TransactionStatistics,
    TransactionSummary,
)
from .transaction import Transaction

__all__ = [
    "PriceHistogram",
    "PriceRange",
    "Transaction",
    "TransactionStatistics",
    "TransactionSummary",
]
