"""Repository interfaces for read-only record access."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from sales_dashboard.domain.entities import Transaction


class TransactionRepository(ABC):
    """
    Abstract read-only repository for Transaction records.

    Implementations hold an immutable collection; no operation
    creates, mutates or deletes a record.
    """

    @abstractmethod
    def all(self) -> Sequence[Transaction]:
        """
        Return every record in store order.

        Returns:
            All transactions, in the order they were loaded
        """
        ...

    @abstractmethod
    def filter_by_month(self, month: int) -> List[Transaction]:
        """
        Retrieve the records sold in a calendar month.

        Args:
            month: Calendar month, 1-12

        Returns:
            Matching transactions in store order (empty if none match)
        """
        ...
