"""External client interfaces."""

from abc import ABC, abstractmethod
from typing import List, Optional

from sales_dashboard.domain.entities import Transaction


class TransactionsClient(ABC):
    """
    Abstract client for the transactions API.

    Used by the dashboard to fetch the records for a selected month.
    """

    @abstractmethod
    async def get_transactions(self, month: Optional[int]) -> List[Transaction]:
        """
        Fetch the transactions sold in a calendar month.

        Args:
            month: Calendar month 1-12, or None when nothing is selected

        Returns:
            Transactions in the order returned by the API

        Raises:
            TransactionsFetchException: On transport failure or an error status
        """
        ...
