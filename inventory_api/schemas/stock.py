# inventory_api/schemas/stock.py
from datetime import datetime
from typing import Optional

from inventory_api.models.stock import StockMovementType
from inventory_api.schemas.common import ORMBase


# Schema for returning stock movement details
class StockMovementOut(ORMBase):
    movement_id: str
    product_id: str
    qty: int
    type: StockMovementType
    reason: Optional[str] = None
    created_at: datetime
