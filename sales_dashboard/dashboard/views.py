"""Table, statistics and selector content for the dashboard page."""

from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

from sales_dashboard.domain.entities import Transaction

from .state import DashboardState

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

SELECT_MONTH_LABEL = "Select Month"
NO_DATA_MESSAGE = "No data available for the selected month"

TABLE_COLUMNS = ["ID", "Title", "Price", "Sold", "Date of Sale"]


def month_options() -> List[Tuple[Optional[int], str]]:
    """Select box options: an empty choice followed by January-December."""
    return [(None, SELECT_MONTH_LABEL)] + [
        (number, name) for number, name in enumerate(MONTH_NAMES, start=1)
    ]


def format_currency(amount: float) -> str:
    return f"${amount:.2f}"


def format_sale_date(txn: Transaction) -> str:
    # M/D/YYYY, no zero padding
    d = txn.date_of_sale
    return f"{d.month}/{d.day}/{d.year}"


def transaction_rows(state: DashboardState) -> List[Dict[str, Any]]:
    return [
        {
            "ID": txn.id,
            "Title": txn.title,
            "Price": format_currency(txn.price),
            "Sold": "Yes" if txn.sold else "No",
            "Date of Sale": format_sale_date(txn),
        }
        for txn in state.transactions
    ]


def transactions_frame(state: DashboardState) -> pd.DataFrame:
    """Transaction List table; empty frame with headers when there is no data."""
    return pd.DataFrame(transaction_rows(state), columns=TABLE_COLUMNS)


def format_statistics(state: DashboardState) -> List[Tuple[str, str]]:
    """Label/value pairs for the Transaction Statistics card."""
    stats = state.statistics
    return [
        ("Total Sales", format_currency(stats.total_sales)),
        ("Total Sold Items", str(stats.total_sold)),
        ("Total Not Sold Items", str(stats.total_not_sold)),
    ]
