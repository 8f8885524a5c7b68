"""
Price Range Bucketing for the Sales Dashboard.

Maps an item price to one of the four ranges shown on the bar chart.
Upper bounds are inclusive; anything above the last bound lands in
the open-ended top range.
"""

from typing import Tuple

from sales_dashboard.domain.entities import PriceRange

# (inclusive upper bound, bucket), checked in order
PRICE_RANGE_BOUNDS: Tuple[Tuple[float, PriceRange], ...] = (
    (100, PriceRange.UP_TO_100),
    (500, PriceRange.UP_TO_500),
    (1000, PriceRange.UP_TO_1000),
)


def price_range_for(price: float) -> PriceRange:
    """
    Get the price range bucket for an item price.

    Args:
        price: Item price in dollars

    Returns:
        The bucket the price falls into
    """
    for upper, bucket in PRICE_RANGE_BOUNDS:
        if price <= upper:
            return bucket
    return PriceRange.ABOVE_1000
