"""Prometheus metrics for the Sales Dashboard service.

Metrics are organized into two categories:

Query Metrics (server side):
- sales_dashboard_transactions_query_total: Month queries by outcome
- sales_dashboard_transactions_returned: Records returned per query
- sales_dashboard_record_store_size: Records held by the store
- sales_dashboard_http_requests_total: HTTP requests by endpoint/status
- sales_dashboard_http_request_latency_seconds: HTTP latency by endpoint

Dashboard Metrics (client side):
- sales_dashboard_fetch_latency_seconds: Transactions fetch latency
- sales_dashboard_fetch_total: Fetches by status
- sales_dashboard_stale_responses_total: Responses discarded as stale
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, Gauge, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Query Metrics
# =============================================================================

transactions_query_total = Counter(
    "sales_dashboard_transactions_query_total",
    "Total number of month queries",
    ["outcome"],  # matched, empty, invalid_month
)

transactions_returned = Histogram(
    "sales_dashboard_transactions_returned",
    "Number of records returned per month query",
    buckets=[0, 1, 5, 10, 25, 50, 100, 250, 500],
)

record_store_size = Gauge(
    "sales_dashboard_record_store_size",
    "Number of transaction records held by the record store",
)

http_requests_total = Counter(
    "sales_dashboard_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "sales_dashboard_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
)


# =============================================================================
# Dashboard Metrics
# =============================================================================

fetch_latency = Histogram(
    "sales_dashboard_fetch_latency_seconds",
    "Dashboard transactions fetch latency in seconds",
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

fetch_total = Counter(
    "sales_dashboard_fetch_total",
    "Total number of dashboard transactions fetches",
    ["status"],  # success, failure
)

stale_responses_total = Counter(
    "sales_dashboard_stale_responses_total",
    "Responses discarded because a newer request was dispatched",
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_query(month: int | None, returned: int) -> None:
    """Record a month query in metrics."""
    if month is None:
        outcome = "invalid_month"
    elif returned == 0:
        outcome = "empty"
    else:
        outcome = "matched"

    transactions_query_total.labels(outcome=outcome).inc()
    transactions_returned.observe(returned)


def set_record_store_size(size: int) -> None:
    """Publish the number of records held by the store."""
    record_store_size.set(size)


@contextmanager
def track_fetch_latency() -> Generator[None, None, None]:
    """Context manager to track dashboard fetch latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        fetch_latency.observe(duration)


def record_fetch_success() -> None:
    """Record a successful dashboard fetch."""
    fetch_total.labels(status="success").inc()


def record_fetch_failure() -> None:
    """Record a failed dashboard fetch."""
    fetch_total.labels(status="failure").inc()


def record_stale_response() -> None:
    """Record a response dropped in favour of a newer request."""
    stale_responses_total.inc()


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
