"""Error body returned by the transactions API."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Body of a 4xx/5xx response, e.g. when the record store is unavailable."""
    error: str = Field(
        ...,
        description="Error code, e.g. RECORD_STORE_LOAD_ERROR or INTERNAL_ERROR",
        examples=["RECORD_STORE_LOAD_ERROR"],
    )
    message: str = Field(
        ...,
        description="What went wrong, safe to show to the caller",
        examples=["Transaction data is unavailable."],
    )
    request_id: str | None = Field(
        None,
        description="Value of the X-Request-ID header for this request",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "RECORD_STORE_LOAD_ERROR",
                    "message": "Transaction data is unavailable.",
                    "request_id": "3f2b9c0e8d4a4f7e9b1c2d3e4f5a6b7c",
                }
            ]
        }
    }
