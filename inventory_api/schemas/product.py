# inventory_api/schemas/product.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from inventory_api.schemas.common import ORMBase, Description


class CategorySummary(ORMBase):
    category_id: str
    name: str
    description: Optional[str] = None


# Schema for creating a new product
class ProductCreate(BaseModel):
    name: str = Field(min_length=3)
    description: Description = None
    price: float = Field(ge=0)
    stock: int = Field(default=0, ge=0)
    picture: Optional[str] = None
    active: bool = True


# Schema for partial product updates
class ProductUpdate(BaseModel):
    """Schema for PATCH requests - all fields optional."""
    name: Optional[str] = Field(None, min_length=3)
    description: Description = None
    price: Optional[float] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0)
    picture: Optional[str] = None
    active: Optional[bool] = None


# Full product representation
class ProductOut(ORMBase):
    product_id: str
    name: str
    description: Optional[str] = None
    price: float
    stock: int
    picture: Optional[str] = None
    active: bool
    created_at: datetime
    updated_at: datetime


# Product listing entry with its categories embedded
class ProductWithCategories(ProductOut):
    categories: List[CategorySummary] = []
