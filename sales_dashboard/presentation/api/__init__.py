"""HTTP API routers."""

from fastapi import APIRouter

from .health import health_router
from .transactions import transactions_router

api_router = APIRouter()

api_router.include_router(health_router, tags=["Health"])
api_router.include_router(transactions_router, tags=["Transactions"])

__all__ = [
    "api_router",
]
