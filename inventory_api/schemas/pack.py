# inventory_api/schemas/pack.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from inventory_api.schemas.common import ORMBase, UUIDStr, Description


class PackCreate(BaseModel):
    name: str = Field(min_length=3)
    description: Description = None
    price: float = Field(ge=0)
    picture: Optional[str] = None
    active: bool = True


class PackUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=3)
    description: Description = None
    price: Optional[float] = Field(None, ge=0)
    picture: Optional[str] = None
    active: Optional[bool] = None


# Single pack item as received on POST /pack-items
class PackItemCreate(BaseModel):
    pack_id: UUIDStr
    product_id: UUIDStr
    quantity: int = Field(ge=1)


# POST /packs/{pack_id}/items takes the pack from the URL
class PackItemForPack(BaseModel):
    product_id: UUIDStr
    quantity: int = Field(ge=1)


class PackItemUpdate(BaseModel):
    pack_id: Optional[UUIDStr] = None
    product_id: Optional[UUIDStr] = None
    quantity: Optional[int] = Field(None, ge=1)


class PackItemOut(ORMBase):
    pack_item_id: str
    pack_id: str
    product_id: str
    quantity: int
    created_at: datetime
    updated_at: datetime


class PackOut(ORMBase):
    pack_id: str
    name: str
    description: Optional[str] = None
    price: float
    picture: Optional[str] = None
    active: bool
    created_at: datetime
    updated_at: datetime
    pack_items: List[PackItemOut] = []


# Expanded recipe line with the product's current data
class PackProductOut(BaseModel):
    pack_item_id: str
    product_id: str
    quantity: int
    product_name: str
    product_price: float
    product_stock: int


class PackAvailabilityOut(BaseModel):
    pack_id: str
    quantity: int
    available: bool
