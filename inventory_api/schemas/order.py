from pydantic import BaseModel, Field, AfterValidator
from typing import Annotated, Any, Dict, List, Optional
from datetime import datetime

from inventory_api.models.item_type import ItemKind
from inventory_api.schemas.common import ORMBase, UUIDStr
from inventory_api.utils.identifiers import is_uuid


def _check_item_type_ref(value: str) -> str:
    # Seeded item types are addressed by their kind ("product" / "pack")
    if is_uuid(value) or value in {k.value for k in ItemKind}:
        return value
    raise ValueError("El tipo de item no es válido.")


ItemTypeRef = Annotated[str, AfterValidator(_check_item_type_ref)]


# Input schema for a new order header
class OrderCreate(BaseModel):
    payment_method_id: UUIDStr
    total: float = Field(default=0.0, ge=0)


# Input schema for a sale line; unit_price defaults to the item's price
class DetailOrderCreate(BaseModel):
    order_id: UUIDStr
    item_type: ItemTypeRef
    item_id: UUIDStr
    quantity: int = Field(ge=1)
    unit_price: Optional[float] = Field(None, ge=0)


class DetailOrderOut(ORMBase):
    order_detail_id: str
    order_id: str
    item_type: str
    item_id: str
    quantity: int
    unit_price: float
    total_price: float
    created_at: datetime


class DetailOrderWithItem(DetailOrderOut):
    item_details: Optional[Dict[str, Any]] = None


class OrderOut(ORMBase):
    order_id: str
    date: datetime
    total: float
    payment_method_id: str
    created_at: datetime


class OrderWithDetails(OrderOut):
    details: List[DetailOrderOut] = []
