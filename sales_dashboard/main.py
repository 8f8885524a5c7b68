"""
Sales Dashboard - Main Application Entry Point

Serves the bundled product transactions, filtered by calendar month,
to the dashboard frontend.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from sales_dashboard import __version__
from sales_dashboard.core.config import settings
from sales_dashboard.core.logging import setup_logging
from sales_dashboard.core.metrics import (
    get_metrics,
    get_metrics_content_type,
    set_record_store_size,
)
from sales_dashboard.infrastructure.store import TransactionStore
from sales_dashboard.presentation.api import api_router
from sales_dashboard.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Handles startup and shutdown events:
    - Set up logging
    - Load the record store once; it stays read-only until shutdown
    """
    setup_logging()

    logger = structlog.get_logger(__name__)

    store = TransactionStore.from_json_file(
        settings.data_file,
        timezone=settings.record_timezone,
    )
    app.state.transaction_store = store
    set_record_store_size(len(store))

    logger.info("application_started", version=__version__, records=len(store))

    yield

    app.state.transaction_store = None
    logger.info("application_stopped")


app = FastAPI(
    title="Sales Dashboard",
    description="Monthly transaction query service",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)

error_handler_middleware(app)

app.include_router(api_router)


@app.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    if not settings.metrics_enabled:
        return Response(status_code=404)

    return Response(
        content=get_metrics(),
        media_type=get_metrics_content_type(),
    )


@app.get("/", include_in_schema=False)
async def root():
    """Redirect to API documentation."""

    return RedirectResponse(url="/docs")


def run() -> None:
    """Run the API with uvicorn."""
    uvicorn.run(
        "sales_dashboard.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
