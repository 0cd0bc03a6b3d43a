from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class CategoryDTO(BaseModel):
    id: int
    name: str
    description: Optional[str] = None


class ProductDTO(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: float
    category: Optional[CategoryDTO] = None


class InventoryDTO(BaseModel):
    id: int
    product: Optional[ProductDTO] = None
    quantity: int
    location: str


class ProductStockResponse(BaseModel):
    """A product together with its stock summed over every inventory row."""
    id: int
    name: str
    description: Optional[str] = None
    price: float
    category: Optional[CategoryDTO] = None
    stock_quantity: int
    is_low_stock: bool
    # Distinct locations, sorted and comma-joined
    location: Optional[str] = None
    last_updated: datetime
