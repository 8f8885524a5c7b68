"""
Fixtures for integration tests.

Provides:
- A record store built from fixture records
- Test client for the FastAPI app with the store injected
- Helpers for running the dashboard client against the app
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from sales_dashboard.main import app
from sales_dashboard.core.dependencies import get_transaction_repository
from sales_dashboard.infrastructure.store import TransactionStore


# =============================================================================
# Test Data
# =============================================================================

SCENARIO_RECORDS = [
    {"id": 1, "title": "Desk Lamp", "price": 50, "sold": True, "dateOfSale": "2024-03-05"},
    {"id": 2, "title": "Office Chair", "price": 700, "sold": False, "dateOfSale": "2024-03-20"},
    {"id": 3, "title": "Laptop", "price": 1500, "sold": True, "dateOfSale": "2024-04-01"},
]

EXTRA_RECORDS = [
    {"id": 4, "title": "Backpack", "price": 329.85, "sold": False, "dateOfSale": "2021-11-27T20:29:54+05:30"},
    {"id": 5, "title": "Jacket", "price": 615.89, "sold": True, "dateOfSale": "2022-07-27T20:29:54+05:30"},
    {"id": 6, "title": "Bracelet", "price": 44900, "sold": False, "dateOfSale": "2022-02-27T20:29:54+05:30"},
    {"id": 7, "title": "Mug Set", "price": 100, "sold": True, "dateOfSale": "2021-12-05T08:30:00+05:30"},
    {"id": 8, "title": "Notebook", "price": 3.5, "sold": True, "dateOfSale": "2023-03-11T08:00:00Z"},
    {"id": 9, "title": "Speaker", "price": 101, "sold": False, "dateOfSale": "2022-11-08T16:20:00+05:30"},
]


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def scenario_store() -> TransactionStore:
    """Three records: two sold in March, one in April."""
    return TransactionStore.from_records(SCENARIO_RECORDS)


@pytest.fixture
def full_store() -> TransactionStore:
    """Scenario records plus a spread of months and price ranges."""
    return TransactionStore.from_records(SCENARIO_RECORDS + EXTRA_RECORDS)


# =============================================================================
# App Client Fixtures
# =============================================================================

async def _client_for(store: TransactionStore) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_transaction_repository] = lambda: store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(scenario_store: TransactionStore) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client serving the scenario store.

    The lifespan does not run under ASGITransport, so the store is
    injected through a dependency override instead of app.state.
    """
    async for ac in _client_for(scenario_store):
        yield ac


@pytest_asyncio.fixture
async def full_client(full_store: TransactionStore) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client serving the full store."""
    async for ac in _client_for(full_store):
        yield ac


@pytest.fixture
def app_transport(scenario_store: TransactionStore):
    """ASGI transport for HttpTransactionsClient, serving the scenario store."""
    app.dependency_overrides[get_transaction_repository] = lambda: scenario_store
    yield ASGITransport(app=app)
    app.dependency_overrides.clear()
