# inventory_api/routes/orders.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventory_api.database import get_db
from inventory_api.routes.deps import IdPath, require_rows
from inventory_api.services.orders import OrderService
from inventory_api.utils.responses import respond, serialize
from inventory_api.schemas.order import OrderCreate, OrderOut, OrderWithDetails

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.get("/")
def list_orders(db: Session = Depends(get_db)):
    orders = require_rows(OrderService(db).list(), "No se encontraron órdenes.")
    return respond("Órdenes obtenidas correctamente.", serialize(OrderOut, orders))


@router.get("/{order_id}")
def get_order(order_id: IdPath, db: Session = Depends(get_db)):
    order = OrderService(db).get_or_404(order_id)
    return respond("Orden obtenida correctamente.", serialize(OrderOut, order))


@router.get("/{order_id}/with-details")
def get_order_with_details(order_id: IdPath, db: Session = Depends(get_db)):
    order = OrderService(db).with_details(order_id)
    return respond("Orden con detalles obtenida correctamente.", serialize(OrderWithDetails, order))


@router.post("/")
def create_order(payload: OrderCreate, db: Session = Depends(get_db)):
    order = OrderService(db).create(payload.model_dump())
    return respond("Orden creada correctamente.", serialize(OrderOut, order), 201)


# Owned detail orders go with it; stock is not restored
@router.delete("/{order_id}")
def delete_order(order_id: IdPath, db: Session = Depends(get_db)):
    service = OrderService(db)
    data = serialize(OrderOut, service.get_or_404(order_id))
    service.delete(order_id)
    return respond("Orden eliminada correctamente.", data)
