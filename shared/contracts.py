"""
Wire schemas exchanged between the business service and the data service.

The data service validates request bodies and serializes responses with these
models; the business service validates its own inbound bodies with the
``*Create`` models and parses data service responses into the ``*Read``
models, so both sides agree on one typed shape.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator


def _require_text(value: str, message: str) -> str:
    if value is None or not value.strip():
        raise ValueError(message)
    return value.strip()


class CategoryCreate(BaseModel):
    name: str = Field(..., max_length=255)
    description: Optional[str] = Field(None, max_length=1000)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        return _require_text(value, "Category name is required")


class CategoryRead(BaseModel):
    id: int
    name: str
    description: Optional[str] = None

    class Config:
        from_attributes = True


class ProductCreate(BaseModel):
    name: str = Field(..., max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    category_id: Optional[int] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        return _require_text(value, "Product name is required")


class ProductRead(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: float
    category_id: Optional[int] = None
    category: Optional[CategoryRead] = None

    class Config:
        from_attributes = True


class InventoryCreate(BaseModel):
    product_id: int
    quantity: int = Field(..., ge=0)
    location: str = Field(..., max_length=255)

    @field_validator("location")
    @classmethod
    def location_not_blank(cls, value: str) -> str:
        return _require_text(value, "Location is required")


class InventoryRead(BaseModel):
    id: int
    product_id: int
    quantity: int
    location: str
    product: Optional[ProductRead] = None

    class Config:
        from_attributes = True
