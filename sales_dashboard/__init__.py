"""
Sales Dashboard - Monthly Transaction Query Service

A FastAPI-based service that serves a bundled collection of product
transactions filtered by calendar month, plus the dashboard that
renders them as a table, summary statistics and a price-range chart.
"""

__version__ = "0.1.0"
