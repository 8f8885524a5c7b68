"""
Unit Tests for the month query use case.

These tests verify:
1. Month selector parsing (valid, malformed, out of range)
2. TransactionService returns DTOs in store order
3. Invalid months yield an empty result, never an error
"""

import pytest

from sales_dashboard.application.dto import TransactionResponse
from sales_dashboard.application.services import TransactionService, parse_month
from sales_dashboard.infrastructure.store import TransactionStore


RECORDS = [
    {"id": 1, "title": "Desk Lamp", "price": 50, "sold": True, "dateOfSale": "2024-03-05"},
    {"id": 2, "title": "Office Chair", "price": 700, "sold": False, "dateOfSale": "2024-03-20"},
    {"id": 3, "title": "Laptop", "price": 1500, "sold": True, "dateOfSale": "2024-04-01"},
]


@pytest.fixture
def service() -> TransactionService:
    return TransactionService(TransactionStore.from_records(RECORDS))


# =============================================================================
# parse_month Tests
# =============================================================================

class TestParseMonth:
    """Tests for month selector parsing."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("1", 1),
            ("12", 12),
            (" 3 ", 3),
            ("03", 3),
            (7, 7),
        ],
    )
    def test_valid_months(self, raw, expected):
        assert parse_month(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [None, "", "   ", "0", "13", "-1", "abc", "3.5", "3abc", "+3", "\uff13", "\u0663", 0, 13, True, 3.0, []],
    )
    def test_invalid_months(self, raw):
        assert parse_month(raw) is None


# =============================================================================
# TransactionService Tests
# =============================================================================

class TestTransactionService:
    """Tests for TransactionService.get_transactions_for_month."""

    def test_returns_matching_records_in_store_order(self, service):
        result = service.get_transactions_for_month("3")

        assert [txn.id for txn in result] == [1, 2]
        assert all(isinstance(txn, TransactionResponse) for txn in result)

    def test_response_carries_iso_date(self, service):
        result = service.get_transactions_for_month("4")

        assert len(result) == 1
        assert result[0].date_of_sale == "2024-04-01T00:00:00+00:00"
        assert result[0].price == 1500.0
        assert result[0].sold is True

    def test_month_without_sales_is_empty(self, service):
        assert service.get_transactions_for_month("8") == []

    @pytest.mark.parametrize("raw", [None, "13", "0", "march", ""])
    def test_invalid_month_is_empty(self, service, raw):
        assert service.get_transactions_for_month(raw) == []
