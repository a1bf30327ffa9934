import logging
from typing import Any, Dict

from sqlalchemy.orm import selectinload

from inventory_api.errors import BusinessRuleError
from inventory_api.models.category import ProductCategory
from inventory_api.models.expense import ExpenseItem
from inventory_api.models.order import DetailOrder
from inventory_api.models.pack import PackItem
from inventory_api.models.product import Product
from inventory_api.models.stock import StockMovementType
from inventory_api.services.crud import CrudService
from inventory_api.services.stock import StockLedger

logger = logging.getLogger(__name__)


class ProductService(CrudService[Product]):
    model = Product
    id_field = "product_id"
    not_found_message = "Producto no encontrado."
    order_by = "name"

    def query(self):
        return super().query().options(selectinload(Product.categories))

    def after_update(self, obj: Product, changes: Dict[str, Any]) -> None:
        # Direct stock edits still leave a trace in the movement log
        if "stock" in changes:
            old, new = changes["stock"]
            StockLedger(self.db).record_movement(
                obj.product_id, new - old, StockMovementType.ADJUSTMENT, "Ajuste manual de stock"
            )
            logger.info("Stock of product %s set from %d to %d", obj.product_id, old, new)

    def before_delete(self, obj: Product) -> None:
        pid = obj.product_id
        in_use = (
            self.db.query(PackItem.pack_item_id).filter(PackItem.product_id == pid).first()
            or self.db.query(ExpenseItem.expense_item_id).filter(ExpenseItem.product_id == pid).first()
            or self.db.query(DetailOrder.order_detail_id).filter(DetailOrder.item_id == pid).first()
        )
        if in_use:
            raise BusinessRuleError("No se puede eliminar un producto que está en uso por packs, gastos u órdenes.")

        self.db.query(ProductCategory).filter(ProductCategory.product_id == pid).delete(synchronize_session=False)
