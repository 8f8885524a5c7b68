"""
Statistics Module for the Sales Dashboard
"""

from .aggregator import (
    compute_price_histogram,
    compute_statistics,
    summarize_transactions,
)
from .price_ranges import PRICE_RANGE_BOUNDS, price_range_for

__all__ = [
    # Aggregation
    "summarize_transactions",
    "compute_statistics",
    "compute_price_histogram",
    # Price ranges
    "PRICE_RANGE_BOUNDS",
    "price_range_for",
]
