"""
Dashboard - renders month query results as a table, statistics and chart.

This package contains:
- the controller that turns month selections into queries
- the immutable view state
- table/statistics formatting and the price-range chart
- the Streamlit page (app.py, run with `streamlit run`)
"""

from .controller import DashboardController
from .state import DashboardState

__all__ = [
    "DashboardController",
    "DashboardState",
]
