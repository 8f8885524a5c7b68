"""Streamlit page for the transaction dashboard.

Run with: streamlit run sales_dashboard/dashboard/app.py
"""

import asyncio

import streamlit as st

from sales_dashboard.core.logging import setup_logging
from sales_dashboard.dashboard.charts import price_range_chart
from sales_dashboard.dashboard.controller import DashboardController
from sales_dashboard.dashboard.views import (
    NO_DATA_MESSAGE,
    format_statistics,
    month_options,
    transactions_frame,
)
from sales_dashboard.infrastructure.clients import HttpTransactionsClient


def get_controller() -> DashboardController:
    """One controller per browser session, kept across reruns."""
    if "controller" not in st.session_state:
        setup_logging()
        st.session_state["controller"] = DashboardController(HttpTransactionsClient())
    return st.session_state["controller"]


st.set_page_config(page_title="Transaction Management", layout="wide")
st.title("Transaction Management")

controller = get_controller()

options = month_options()
labels = dict(options)

select_col, button_col = st.columns([4, 1])
with select_col:
    selected_month = st.selectbox(
        "Month",
        options=[value for value, _ in options],
        format_func=lambda value: labels[value],
        key="selected_month",
        label_visibility="collapsed",
    )
with button_col:
    search_clicked = st.button("Search", type="primary", use_container_width=True)

# Selecting a different month refetches; re-selecting is a no-op.
asyncio.run(controller.select_month(selected_month))
if search_clicked:
    asyncio.run(controller.search())

state = controller.state

st.subheader("Transaction List")
st.dataframe(transactions_frame(state), hide_index=True, use_container_width=True)

st.subheader("Transaction Statistics")
for column, (label, value) in zip(st.columns(3), format_statistics(state)):
    column.metric(label, value)

st.subheader("Price Range Bar Chart")
if state.has_data:
    st.altair_chart(price_range_chart(state.histogram), use_container_width=True)
else:
    st.info(NO_DATA_MESSAGE)
