"""Data transfer objects for transaction queries."""

from dataclasses import dataclass

from sales_dashboard.domain.entities import Transaction


@dataclass(frozen=True)
class TransactionResponse:
    """Response data for a single transaction record."""

    id: int
    title: str
    price: float
    sold: bool
    date_of_sale: str

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionResponse":
        return cls(
            id=transaction.id,
            title=transaction.title,
            price=transaction.price,
            sold=transaction.sold,
            date_of_sale=transaction.date_of_sale.isoformat(),
        )
