"""
Product domain models and schemas.

Request/response schemas for the product catalog.

Dependencies: pydantic
System role: Product API contracts
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _check_cents(value: float | None) -> float | None:
    if value is not None and round(value, 2) != value:
        raise ValueError("price must have at most 2 decimal places")
    return value


class CreateProductRequest(BaseModel):
    """Request schema for creating a new product."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, description="Product name", examples=["Wireless Headphones"])
    description: str = Field(..., description="Product description")
    price: float = Field(..., ge=0, description="Product price", examples=[299.99])
    category: str = Field(..., min_length=1, description="Product category", examples=["electronics"])
    stock: int = Field(..., ge=0, description="Stock quantity")
    sku: str = Field(..., min_length=1, description="Product SKU", examples=["WH-001"])

    @field_validator("price")
    @classmethod
    def validate_price(cls, value: float | None) -> float | None:
        return _check_cents(value)


class UpdateProductRequest(BaseModel):
    """Request schema for updating a product; omitted fields are left untouched."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(None, min_length=1)
    description: str | None = None
    price: float | None = Field(None, ge=0)
    category: str | None = Field(None, min_length=1)
    stock: int | None = Field(None, ge=0)
    sku: str | None = Field(None, min_length=1)

    @field_validator("price")
    @classmethod
    def validate_price(cls, value: float | None) -> float | None:
        return _check_cents(value)


class ProductResponse(BaseModel):
    """Response schema for product operations."""

    id: str
    name: str
    description: str
    price: float
    category: str
    stock: int
    sku: str
    created_at: datetime
    updated_at: datetime
