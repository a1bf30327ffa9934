from typing import Optional

from pydantic import BaseModel, Field

from inventory_api.models.item_type import ItemKind
from inventory_api.schemas.common import ORMBase


class PaymentMethodCreate(BaseModel):
    name: str = Field(min_length=3)


class PaymentMethodUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=3)


class PaymentMethodOut(ORMBase):
    payment_method_id: str
    name: str


class ItemTypeCreate(BaseModel):
    name: ItemKind


class ItemTypeOut(ORMBase):
    item_type_id: str
    name: ItemKind
