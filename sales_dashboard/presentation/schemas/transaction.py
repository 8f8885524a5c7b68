"""Transaction-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class TransactionSchema(BaseModel):
    """Schema for a single record in the GET /transactions response."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "id": 1,
                    "title": "Fjallraven Foldsack No. 1 Backpack",
                    "price": 329.85,
                    "sold": False,
                    "dateOfSale": "2021-11-27T14:59:54+00:00",
                }
            ]
        },
    )

    id: int = Field(
        ...,
        description="Record identifier, unique within the store",
    )
    title: str = Field(
        ...,
        description="Display name of the product",
    )
    price: float = Field(
        ...,
        ge=0,
        description="Listed price in dollars",
        examples=[329.85],
    )
    sold: bool = Field(
        ...,
        description="Whether the item has been sold",
    )
    date_of_sale: str = Field(
        ...,
        alias="dateOfSale",
        description="Sale timestamp in ISO 8601 format, normalized to the store timezone",
        examples=["2021-11-27T14:59:54+00:00"],
    )
