# product_service/schemas.py

"""
Pydantic schemas for the Product Service API.
These define the data structures for incoming requests and outgoing responses.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .models import NAME_MAX_LENGTH


# Request body of POST /products and PUT /products/{id}.
# PUT replaces every field, so an omitted description clears it.
class ProductPayload(BaseModel):
    name: str = Field(..., max_length=NAME_MAX_LENGTH, description="Name of the product.")
    description: Optional[str] = Field(None, description="Detailed description of the product.")
    # Strict: booleans and numeric strings are type errors, ints are accepted
    price: float = Field(..., strict=True, allow_inf_nan=False, description="Price of the product.")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Sample Product",
                "description": "This is a sample product",
                "price": 99.99,
            }
        }
    )


# Used in GET, POST, PUT responses for /products endpoints.
class ProductResponse(BaseModel):
    id: int = Field(..., description="Unique identifier of the product.")
    name: str
    description: Optional[str] = None
    price: float

    model_config = ConfigDict(from_attributes=True)


class FieldError(BaseModel):
    field: str
    message: str


class ErrorMessage(BaseModel):
    detail: str


class ValidationErrorMessage(ErrorMessage):
    errors: List[FieldError] = Field(default_factory=list)
