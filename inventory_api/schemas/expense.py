from datetime import date, datetime
from typing import Annotated, Optional

from pydantic import BaseModel, Field, BeforeValidator

from inventory_api.schemas.common import ORMBase, UUIDStr
from inventory_api.utils.date import parse_date

ExpenseDate = Annotated[date, BeforeValidator(parse_date)]


class ExpenseCreate(BaseModel):
    date: ExpenseDate
    total: float = Field(ge=0)
    location: Optional[str] = None
    payment_method_id: UUIDStr
    notes: Optional[str] = None


class ExpenseOut(ORMBase):
    expense_id: str
    date: date
    total: float
    location: Optional[str] = None
    payment_method_id: str
    notes: Optional[str] = None
    created_at: datetime


# Subtotal is always computed server-side; a client value is ignored
class ExpenseItemCreate(BaseModel):
    expense_id: UUIDStr
    product_id: UUIDStr
    quantity: int = Field(ge=1)
    unit_price: float = Field(ge=0)


class ExpenseItemOut(ORMBase):
    expense_item_id: str
    expense_id: str
    product_id: str
    quantity: int
    unit_price: float
    subtotal: float
