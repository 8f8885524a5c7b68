"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends, Request

from sales_dashboard.domain.exceptions import RecordStoreLoadException
from sales_dashboard.domain.interfaces import TransactionRepository
from sales_dashboard.application.services import TransactionService


# Repository dependencies
def get_transaction_repository(request: Request) -> TransactionRepository:
    """Get the record store loaded during application startup."""
    store = getattr(request.app.state, "transaction_store", None)
    if store is None:
        raise RecordStoreLoadException("Record store has not been loaded")
    return store


# Service dependencies
def get_transaction_service(
    transaction_repo: Annotated[TransactionRepository, Depends(get_transaction_repository)],
) -> TransactionService:
    """Get a TransactionService bound to the record store."""
    return TransactionService(transaction_repository=transaction_repo)
