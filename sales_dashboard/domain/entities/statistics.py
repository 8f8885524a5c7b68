"""Aggregate views derived from a list of transactions."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple


class PriceRange(str, Enum):
    """Price buckets shown on the dashboard bar chart."""

    UP_TO_100 = "0-100"
    UP_TO_500 = "101-500"
    UP_TO_1000 = "501-1000"
    ABOVE_1000 = "1000+"


@dataclass(frozen=True)
class TransactionStatistics:
    """
    Sales totals for a set of transactions.

    Attributes:
        total_sales: Sum of price over sold items, in dollars
        total_sold: Number of sold items
        total_not_sold: Number of unsold items
    """

    total_sales: float = 0.0
    total_sold: int = 0
    total_not_sold: int = 0

    @property
    def total_items(self) -> int:
        return self.total_sold + self.total_not_sold


@dataclass(frozen=True)
class PriceHistogram:
    """Item counts per price range, in fixed bucket order."""

    counts: Tuple[Tuple[PriceRange, int], ...] = field(
        default_factory=lambda: tuple((bucket, 0) for bucket in PriceRange)
    )

    @property
    def labels(self) -> List[str]:
        return [bucket.value for bucket, _ in self.counts]

    @property
    def values(self) -> List[int]:
        return [count for _, count in self.counts]

    @property
    def total(self) -> int:
        return sum(self.values)

    def count_for(self, bucket: PriceRange) -> int:
        return dict(self.counts)[bucket]

    def to_dict(self) -> Dict[str, int]:
        return {bucket.value: count for bucket, count in self.counts}


@dataclass(frozen=True)
class TransactionSummary:
    """Statistics and price histogram computed in a single pass."""

    statistics: TransactionStatistics = field(default_factory=TransactionStatistics)
    histogram: PriceHistogram = field(default_factory=PriceHistogram)
