"""
Statistics Aggregation for the Sales Dashboard.

Derives the summary totals and the price histogram from the records
returned by a month query. Runs on the dashboard side, after fetch.
"""

from typing import Iterable, Protocol

from sales_dashboard.domain.entities import (
    PriceHistogram,
    PriceRange,
    TransactionStatistics,
    TransactionSummary,
)

from .price_ranges import price_range_for


class PricedItem(Protocol):
    price: float
    sold: bool


def summarize_transactions(transactions: Iterable[PricedItem]) -> TransactionSummary:
    """
    Compute statistics and the price histogram in one pass.

    Args:
        transactions: Records exposing ``price`` and ``sold``

    Returns:
        TransactionSummary with sales totals and per-range counts
    """
    total_sales = 0.0
    total_sold = 0
    total_not_sold = 0
    counts = {bucket: 0 for bucket in PriceRange}

    for txn in transactions:
        if txn.sold:
            total_sold += 1
            total_sales += txn.price
        else:
            total_not_sold += 1

        counts[price_range_for(txn.price)] += 1

    return TransactionSummary(
        statistics=TransactionStatistics(
            total_sales=total_sales,
            total_sold=total_sold,
            total_not_sold=total_not_sold,
        ),
        histogram=PriceHistogram(
            counts=tuple((bucket, counts[bucket]) for bucket in PriceRange),
        ),
    )


def compute_statistics(transactions: Iterable[PricedItem]) -> TransactionStatistics:
    """Sales totals only."""
    return summarize_transactions(transactions).statistics


def compute_price_histogram(transactions: Iterable[PricedItem]) -> PriceHistogram:
    """Price histogram only."""
    return summarize_transactions(transactions).histogram
