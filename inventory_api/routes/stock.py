# inventory_api/routes/stock.py
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from inventory_api.database import get_db
from inventory_api.models.stock import StockMovement, StockMovementType
from inventory_api.routes.deps import require_rows
from inventory_api.utils.identifiers import UUID_PATTERN
from inventory_api.utils.responses import respond, serialize
import inventory_api.schemas.stock as stock_schemas

router = APIRouter(prefix="/stock-movements", tags=["Stock"])


@router.get("/")
def list_movements(
    product_id: Optional[str] = Query(None, pattern=UUID_PATTERN),
    type: Optional[StockMovementType] = Query(None),
    db: Session = Depends(get_db),
):
    query = db.query(StockMovement)

    if product_id:
        query = query.filter(StockMovement.product_id == product_id)
    if type:
        query = query.filter(StockMovement.type == type)

    # Newest first
    movements = query.order_by(StockMovement.created_at.desc()).all()
    require_rows(movements, "No se encontraron movimientos de stock.")
    return respond("Movimientos de stock obtenidos correctamente.", serialize(stock_schemas.StockMovementOut, movements))
