"""Dashboard controller - month selection and refetch handling."""

from typing import Optional

import structlog

from sales_dashboard.core.metrics import record_stale_response
from sales_dashboard.domain.exceptions import TransactionsFetchException
from sales_dashboard.domain.interfaces import TransactionsClient
from sales_dashboard.service.statistics import summarize_transactions

from .state import DashboardState

logger = structlog.get_logger(__name__)


class DashboardController:
    """
    Drives the dashboard from month selections.

    Each selection of a new month dispatches exactly one query. Every
    dispatch gets a sequence number; a response that comes back after
    a newer request was dispatched is dropped, so the view always
    reflects the latest request rather than the slowest response.
    """

    def __init__(self, client: TransactionsClient):
        self._client = client
        self._state = DashboardState()
        self._selected_month: Optional[int] = None
        self._dispatched = 0

    @property
    def state(self) -> DashboardState:
        return self._state

    @property
    def selected_month(self) -> Optional[int]:
        return self._selected_month

    @property
    def latest_sequence(self) -> int:
        return self._dispatched

    async def select_month(self, month: Optional[int]) -> DashboardState:
        """
        Change the selected month, fetching its data.

        Re-selecting the current month does nothing; clearing the
        selection keeps the last rendered state.
        """
        if month == self._selected_month:
            return self._state

        self._selected_month = month
        if month is None:
            return self._state

        return await self._fetch(month)

    async def search(self) -> DashboardState:
        """Re-query the selected month (the Search button)."""
        return await self._fetch(self._selected_month)

    async def _fetch(self, month: Optional[int]) -> DashboardState:
        self._dispatched += 1
        sequence = self._dispatched
        log = logger.bind(month=month, sequence=sequence)

        try:
            transactions = await self._client.get_transactions(month)
        except TransactionsFetchException as e:
            log.error(
                "transactions_fetch_failed",
                error=e.message,
                status_code=e.status_code,
            )
            return self._state

        if sequence < self._dispatched:
            record_stale_response()
            log.info("stale_response_discarded", latest_sequence=self._dispatched)
            return self._state

        self._state = DashboardState(
            month=month,
            transactions=tuple(transactions),
            summary=summarize_transactions(transactions),
            sequence=sequence,
        )

        log.info(
            "dashboard_updated",
            count=len(transactions),
            total_sold=self._state.statistics.total_sold,
        )

        return self._state
