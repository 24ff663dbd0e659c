"""Request/response schemas for product endpoints."""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# NUMERIC(10, 2)
PRICE_MAX_DIGITS = 10
PRICE_DECIMAL_PLACES = 2


class ProductCreate(BaseModel):
    """Payload for creating a product."""

    name: str = Field(..., min_length=1, max_length=255, description="Name of the product")
    description: str = Field(..., min_length=1, description="Detailed description")
    price: Decimal = Field(
        ...,
        gt=0,
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        description="Price (must be positive)",
    )
    stock: int = Field(..., ge=0, le=2_147_483_647, description="Initial stock quantity")


class ProductUpdate(BaseModel):
    """Partial update; omitted fields keep their stored value."""

    name: str | None = Field(default=None, max_length=255)
    description: str | None = None
    price: Decimal | None = Field(
        default=None,
        gt=0,
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
    )
    stock: int | None = Field(default=None, ge=0, le=2_147_483_647)


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    description: str
    price: Decimal
    stock: int
    created_at: datetime
    updated_at: datetime


class ProductResponse(BaseModel):
    status: Literal["success"] = "success"
    data: ProductOut


class ProductListResponse(BaseModel):
    status: Literal["success"] = "success"
    data: list[ProductOut]
