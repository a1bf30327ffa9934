from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventory_api.database import get_db
from inventory_api.routes.deps import IdPath, require_rows
from inventory_api.services.orders import DetailOrderService
from inventory_api.utils.responses import respond, serialize
from inventory_api.schemas.order import DetailOrderCreate, DetailOrderOut, DetailOrderWithItem

router = APIRouter(prefix="/detail-orders", tags=["Detail orders"])


@router.get("/")
def list_detail_orders(db: Session = Depends(get_db)):
    details = require_rows(DetailOrderService(db).list(), "No se encontraron detalles de órdenes.")
    return respond("Detalles de órdenes obtenidos correctamente.", serialize(DetailOrderOut, details))


@router.get("/order/{order_id}")
def list_details_of_order(order_id: IdPath, db: Session = Depends(get_db)):
    details = require_rows(DetailOrderService(db).by_order(order_id), "La orden no tiene detalles.")
    return respond("Detalles de la orden obtenidos correctamente.", serialize(DetailOrderOut, details))


@router.get("/{order_detail_id}")
def get_detail_order(order_detail_id: IdPath, db: Session = Depends(get_db)):
    detail = DetailOrderService(db).get_or_404(order_detail_id)
    return respond("Detalle de orden obtenido correctamente.", serialize(DetailOrderOut, detail))


@router.get("/{order_detail_id}/with-item-info")
def get_detail_order_with_item(order_detail_id: IdPath, db: Session = Depends(get_db)):
    info = DetailOrderService(db).with_item_info(order_detail_id)
    data = DetailOrderOut.model_validate(info["detail"]).model_dump()
    data = DetailOrderWithItem(**data, item_details=info["item_details"]).model_dump(mode="json")
    return respond("Detalle de orden obtenido correctamente.", data)


# Consumes the item's stock; rejected with 400 when there is not enough
@router.post("/")
def create_detail_order(payload: DetailOrderCreate, db: Session = Depends(get_db)):
    detail = DetailOrderService(db).create(payload.model_dump())
    return respond("Detalle de orden creado correctamente.", serialize(DetailOrderOut, detail), 201)


@router.delete("/{order_detail_id}")
def delete_detail_order(order_detail_id: IdPath, db: Session = Depends(get_db)):
    service = DetailOrderService(db)
    data = serialize(DetailOrderOut, service.get_or_404(order_detail_id))
    service.delete(order_detail_id)
    return respond("Detalle de orden eliminado correctamente.", data)
