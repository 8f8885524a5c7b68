"""
Unit Tests for dashboard views and the price-range chart.

These tests verify:
1. Month selector options
2. Table rows and statistics formatting
3. Empty state rendering
4. The Vega-Lite spec of the price-range bar chart
"""

from datetime import datetime, timezone

from sales_dashboard.dashboard import DashboardState
from sales_dashboard.dashboard.charts import price_range_chart, to_vega_spec
from sales_dashboard.dashboard.views import (
    NO_DATA_MESSAGE,
    TABLE_COLUMNS,
    format_statistics,
    month_options,
    transaction_rows,
    transactions_frame,
)
from sales_dashboard.domain.entities import PriceHistogram, Transaction
from sales_dashboard.service.statistics import summarize_transactions


def make_state(*transactions: Transaction) -> DashboardState:
    return DashboardState(
        month=3,
        transactions=tuple(transactions),
        summary=summarize_transactions(transactions),
        sequence=1,
    )


LAMP = Transaction(
    id=1,
    title="Desk Lamp",
    price=50,
    sold=True,
    date_of_sale=datetime(2024, 3, 5, tzinfo=timezone.utc),
)
CHAIR = Transaction(
    id=2,
    title="Office Chair",
    price=700.5,
    sold=False,
    date_of_sale=datetime(2024, 3, 20, 18, 30, tzinfo=timezone.utc),
)


# =============================================================================
# Selector Tests
# =============================================================================

class TestMonthOptions:
    """Tests for the month select box."""

    def test_placeholder_first(self):
        assert month_options()[0] == (None, "Select Month")

    def test_twelve_calendar_months(self):
        options = month_options()[1:]

        assert [value for value, _ in options] == list(range(1, 13))
        assert options[0] == (1, "January")
        assert options[2] == (3, "March")
        assert options[-1] == (12, "December")


# =============================================================================
# Table and Statistics Tests
# =============================================================================

class TestTable:
    """Tests for the Transaction List table."""

    def test_rows_are_formatted(self):
        rows = transaction_rows(make_state(LAMP, CHAIR))

        assert rows == [
            {"ID": 1, "Title": "Desk Lamp", "Price": "$50.00", "Sold": "Yes", "Date of Sale": "3/5/2024"},
            {"ID": 2, "Title": "Office Chair", "Price": "$700.50", "Sold": "No", "Date of Sale": "3/20/2024"},
        ]

    def test_frame_keeps_response_order(self):
        frame = transactions_frame(make_state(CHAIR, LAMP))

        assert list(frame.columns) == TABLE_COLUMNS
        assert frame["ID"].tolist() == [2, 1]

    def test_empty_frame_has_headers(self):
        frame = transactions_frame(DashboardState())

        assert frame.empty
        assert list(frame.columns) == TABLE_COLUMNS


class TestStatistics:
    """Tests for the Transaction Statistics card."""

    def test_statistics_formatting(self):
        assert format_statistics(make_state(LAMP, CHAIR)) == [
            ("Total Sales", "$50.00"),
            ("Total Sold Items", "1"),
            ("Total Not Sold Items", "1"),
        ]

    def test_empty_statistics_are_zero(self):
        assert format_statistics(DashboardState()) == [
            ("Total Sales", "$0.00"),
            ("Total Sold Items", "0"),
            ("Total Not Sold Items", "0"),
        ]

    def test_no_data_message(self):
        state = make_state()

        assert state.has_data is False
        assert NO_DATA_MESSAGE == "No data available for the selected month"


# =============================================================================
# Chart Tests
# =============================================================================

class TestPriceRangeChart:
    """Tests for the Altair price-range bar chart."""

    def test_chart_is_bar_with_item_counts(self):
        spec = to_vega_spec(price_range_chart(make_state(LAMP, CHAIR).histogram))

        assert spec["mark"]["type"] == "bar"
        assert spec["encoding"]["x"]["field"] == "price_range"
        assert spec["encoding"]["y"]["field"] == "items"
        assert spec["encoding"]["y"]["title"] == "Number of Items"

    def test_chart_data_follows_bucket_order(self):
        spec = to_vega_spec(price_range_chart(make_state(LAMP, CHAIR).histogram))

        values = next(iter(spec["datasets"].values()))

        assert [row["price_range"] for row in values] == ["0-100", "101-500", "501-1000", "1000+"]
        assert [row["items"] for row in values] == [1, 0, 1, 0]
        assert spec["encoding"]["x"]["sort"] == ["0-100", "101-500", "501-1000", "1000+"]

    def test_chart_for_empty_histogram(self):
        spec = to_vega_spec(price_range_chart(PriceHistogram()))

        values = next(iter(spec["datasets"].values()))
        assert [row["items"] for row in values] == [0, 0, 0, 0]
