"""HTTP implementation of TransactionsClient."""

from typing import Any, List, Optional

import httpx
import structlog

from sales_dashboard.core.config import get_dashboard_settings
from sales_dashboard.core.metrics import (
    track_fetch_latency,
    record_fetch_success,
    record_fetch_failure,
)
from sales_dashboard.domain.entities import Transaction
from sales_dashboard.domain.exceptions import (
    InvalidTransactionRecordException,
    TransactionsFetchException,
)
from sales_dashboard.domain.interfaces import TransactionsClient
from sales_dashboard.infrastructure.parsing import parse_transaction, resolve_timezone

logger = structlog.get_logger(__name__)


class HttpTransactionsClient(TransactionsClient):
    """
    HTTP client for the transactions API.

    Issues a single GET per call. Failures are reported as
    TransactionsFetchException and never retried.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        record_timezone: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        dashboard_settings = get_dashboard_settings()
        self._base_url = (base_url or dashboard_settings.api_base_url).rstrip("/")
        self._timeout = timeout or dashboard_settings.request_timeout
        self._zone = resolve_timezone(record_timezone or dashboard_settings.record_timezone)
        self._transport = transport

    async def get_transactions(self, month: Optional[int]) -> List[Transaction]:
        """Fetch the transactions for ``month`` from GET /transactions."""
        url = f"{self._base_url}/transactions"
        params = {} if month is None else {"month": str(month)}

        try:
            with track_fetch_latency():
                async with httpx.AsyncClient(
                    timeout=self._timeout,
                    transport=self._transport,
                ) as client:
                    response = await client.get(url, params=params)
        except httpx.TimeoutException as e:
            record_fetch_failure()
            raise TransactionsFetchException("Transactions API request timed out") from e
        except httpx.HTTPError as e:
            record_fetch_failure()
            raise TransactionsFetchException(f"Transactions API unreachable: {e}") from e

        if response.status_code >= 400:
            record_fetch_failure()
            raise TransactionsFetchException(
                message=f"Transactions API error: {response.text[:200]}",
                status_code=response.status_code,
            )

        try:
            transactions = self._parse_transactions(response.json())
        except (ValueError, InvalidTransactionRecordException) as e:
            record_fetch_failure()
            raise TransactionsFetchException(
                f"Malformed transactions response: {e}",
                status_code=response.status_code,
            ) from e

        record_fetch_success()
        logger.debug("transactions_fetched", month=month, count=len(transactions))
        return transactions

    def _parse_transactions(self, data: Any) -> List[Transaction]:
        """Parse raw API response into Transaction entities."""
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array, got {type(data).__name__}")

        return [parse_transaction(item, self._zone) for item in data]
