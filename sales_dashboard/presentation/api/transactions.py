"""API endpoint for querying transactions by month."""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Query

from sales_dashboard.application.services import TransactionService
from sales_dashboard.core.dependencies import get_transaction_service
from sales_dashboard.presentation.schemas import ErrorResponseSchema, TransactionSchema

transactions_router = APIRouter(prefix="/transactions")


@transactions_router.get(
    "",
    response_model=List[TransactionSchema],
    summary="List Transactions by Month",
    description="""
    Return every transaction whose sale date falls in the given calendar
    month, in store order.

    An absent, non-numeric or out-of-range month is not an error: the
    response is simply an empty array.
    """,
    responses={
        200: {"description": "Matching transactions (possibly empty)"},
        503: {"model": ErrorResponseSchema, "description": "Record store unavailable"},
        500: {"model": ErrorResponseSchema, "description": "Unexpected server error"},
    },
)
def list_transactions(
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
    month: Annotated[
        Optional[str],
        Query(description="Calendar month, 1-12", examples=["3"]),
    ] = None,
) -> List[TransactionSchema]:
    transactions = transaction_service.get_transactions_for_month(month)

    return [
        TransactionSchema(
            id=txn.id,
            title=txn.title,
            price=txn.price,
            sold=txn.sold,
            date_of_sale=txn.date_of_sale,
        )
        for txn in transactions
    ]
