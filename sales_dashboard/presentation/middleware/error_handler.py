"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from sales_dashboard.domain.exceptions import (
    DomainException,
    RecordStoreLoadException,
)
from .request_context import get_request_id, internal_error_response

logger = structlog.get_logger(__name__)


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(RecordStoreLoadException)
    async def record_store_handler(
        request: Request,
        exc: RecordStoreLoadException,
    ) -> JSONResponse:
        """Handle a record store that is unavailable or failed to load."""
        logger.error(
            "record_store_unavailable",
            request_id=get_request_id(),
            message=exc.message,
        )
        return JSONResponse(
            status_code=503,
            content={
                "error": exc.code,
                "message": "Transaction data is unavailable.",
                "request_id": get_request_id(),
            },
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return JSONResponse(
            status_code=400,
            content={
                "error": exc.code,
                "message": exc.message,
                "request_id": get_request_id(),
            },
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions raised outside the request context."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return internal_error_response(get_request_id())
