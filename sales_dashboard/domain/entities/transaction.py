"""Transaction entity representing a product sale record."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Transaction:
    """
    Immutable representation of a product transaction.

    Attributes:
        id: Identifier, unique within the record store
        title: Display name of the product
        price: Listed price in dollars (non-negative)
        sold: True if the item has been sold
        date_of_sale: Timezone-aware timestamp of the sale
    """

    id: int
    title: str
    price: float
    sold: bool
    date_of_sale: datetime

    @property
    def sale_month(self) -> int:
        """Calendar month (1-12) of the sale in the record's zone."""
        return self.date_of_sale.month
