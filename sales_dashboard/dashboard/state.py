"""Immutable view state rendered by the dashboard."""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from sales_dashboard.domain.entities import (
    PriceHistogram,
    Transaction,
    TransactionStatistics,
    TransactionSummary,
)


@dataclass(frozen=True)
class DashboardState:
    """
    Everything the dashboard shows for one query response.

    A new instance replaces the previous one wholesale, so the table,
    statistics and chart always describe the same response.

    Attributes:
        month: Month the data was fetched for (None before the first fetch)
        transactions: Records returned by the API, in response order
        summary: Statistics and histogram derived from ``transactions``
        sequence: Sequence number of the request that produced this state
    """

    month: Optional[int] = None
    transactions: Tuple[Transaction, ...] = ()
    summary: TransactionSummary = field(default_factory=TransactionSummary)
    sequence: int = 0

    @property
    def statistics(self) -> TransactionStatistics:
        return self.summary.statistics

    @property
    def histogram(self) -> PriceHistogram:
        return self.summary.histogram

    @property
    def has_data(self) -> bool:
        return len(self.transactions) > 0
