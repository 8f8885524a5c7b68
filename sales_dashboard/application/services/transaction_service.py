"""Transaction service - handles the month query use case."""

from typing import List, Optional

import structlog

from sales_dashboard.core.metrics import record_query
from sales_dashboard.domain.interfaces import TransactionRepository
from sales_dashboard.application.dto import TransactionResponse

logger = structlog.get_logger(__name__)


def parse_month(raw: object) -> Optional[int]:
    """
    Parse a month selector.

    Accepts an int or an ASCII digit string (whitespace and leading zeros
    allowed) in the range 1-12. Anything else returns None.
    """
    if isinstance(raw, bool):
        return None

    if isinstance(raw, int):
        month = raw
    elif isinstance(raw, str):
        text = raw.strip()
        if not (text.isascii() and text.isdigit()):
            return None
        month = int(text)
    else:
        return None

    if 1 <= month <= 12:
        return month
    return None


class TransactionService:
    """
    Application service for transaction queries.

    Filters the read-only record store by calendar month.
    """

    def __init__(self, transaction_repository: TransactionRepository):
        self._transaction_repo = transaction_repository

    def get_transactions_for_month(self, raw_month: object) -> List[TransactionResponse]:
        """
        Retrieve the transactions sold in a month.

        Args:
            raw_month: The month selector as received (e.g. a query string)

        Returns:
            Matching transactions in store order. An absent or invalid
            month yields an empty list rather than an error.
        """
        month = parse_month(raw_month)

        if month is None:
            logger.info("invalid_month", raw_month=raw_month)
            record_query(None, 0)
            return []

        transactions = self._transaction_repo.filter_by_month(month)

        logger.info(
            "transactions_filtered",
            month=month,
            count=len(transactions),
        )
        record_query(month, len(transactions))

        return [TransactionResponse.from_entity(txn) for txn in transactions]
