"""Health check endpoint for service monitoring."""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from sales_dashboard import __version__
from sales_dashboard.core.dependencies import get_transaction_repository
from sales_dashboard.domain.interfaces import TransactionRepository

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str
    records: int


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns the health status of the service and the size of the record store.",
)
def health_check(
    transaction_repo: Annotated[TransactionRepository, Depends(get_transaction_repository)],
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        records=len(transaction_repo.all()),
    )
