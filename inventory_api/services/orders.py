import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import selectinload

from inventory_api.database import transaction
from inventory_api.errors import NotFoundError, InsufficientStockError
from inventory_api.models.order import Order, DetailOrder
from inventory_api.models.payment_method import PaymentMethod
from inventory_api.services.crud import CrudService
from inventory_api.services.items import ItemRegistry

logger = logging.getLogger(__name__)

ORDER_NOT_FOUND = "Orden no encontrada."


class OrderService(CrudService[Order]):
    model = Order
    id_field = "order_id"
    not_found_message = ORDER_NOT_FOUND
    order_by = "date"

    def before_create(self, fields: Dict[str, Any]) -> None:
        method_id = fields["payment_method_id"]
        if self.db.query(PaymentMethod.payment_method_id).filter(PaymentMethod.payment_method_id == method_id).first() is None:
            raise NotFoundError("Método de pago no encontrado.")

    def with_details(self, order_id: str) -> Order:
        order = (
            self.db.query(Order)
            .options(selectinload(Order.details))
            .filter(Order.order_id == order_id)
            .first()
        )
        if order is None:
            raise NotFoundError(ORDER_NOT_FOUND)
        return order


class DetailOrderService(CrudService[DetailOrder]):
    """Sale lines. Creating one consumes the item's stock in the same transaction."""

    model = DetailOrder
    id_field = "order_detail_id"
    not_found_message = "Detalle de orden no encontrado."
    order_by = "created_at"

    def __init__(self, db):
        super().__init__(db)
        self.items = ItemRegistry(db)

    def by_order(self, order_id: str) -> List[DetailOrder]:
        if self.db.query(Order.order_id).filter(Order.order_id == order_id).first() is None:
            raise NotFoundError(ORDER_NOT_FOUND)
        return (
            self.db.query(DetailOrder)
            .filter(DetailOrder.order_id == order_id)
            .order_by(DetailOrder.created_at)
            .all()
        )

    def with_item_info(self, order_detail_id: str) -> Dict[str, Any]:
        detail = self.get_or_404(order_detail_id)
        return {"detail": detail, "item_details": self.items.describe(detail.item_type, detail.item_id)}

    def create(self, fields: Dict[str, Any]) -> DetailOrder:
        order_id = fields["order_id"]
        if self.db.query(Order.order_id).filter(Order.order_id == order_id).first() is None:
            raise NotFoundError(ORDER_NOT_FOUND)

        item = self.items.resolve(fields["item_type"], fields["item_id"])
        quantity = fields["quantity"]
        unit_price: Optional[float] = fields.get("unit_price")
        if unit_price is None:
            unit_price = item.price

        if not self.items.has_sufficient_stock(item, quantity):
            logger.warning("Sale of %d x %s %s rejected: not enough stock", quantity, item.kind.value, item.item_id)
            raise InsufficientStockError("No hay suficiente stock disponible para completar la venta.")

        with transaction(self.db):
            # The guarded updates re-check stock, so a concurrent sale still fails here
            self.items.consume(item, quantity, f"Orden {order_id}")
            detail = DetailOrder(
                order_id=order_id,
                item_type=fields["item_type"],
                item_id=item.item_id,
                quantity=quantity,
                unit_price=unit_price,
                total_price=quantity * unit_price,
            )
            self.db.add(detail)
        self.db.refresh(detail)
        logger.info("Order %s: sold %d x %s %s", order_id, quantity, item.kind.value, item.item_id)
        return detail
