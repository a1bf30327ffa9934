import logging
from typing import Any, Dict, List

from inventory_api.database import transaction
from inventory_api.errors import NotFoundError, BusinessRuleError
from inventory_api.models.expense import Expense, ExpenseItem
from inventory_api.models.payment_method import PaymentMethod
from inventory_api.models.product import Product
from inventory_api.services.crud import CrudService
from inventory_api.services.stock import StockLedger

logger = logging.getLogger(__name__)

EXPENSE_NOT_FOUND = "Gasto no encontrado."


class ExpenseService(CrudService[Expense]):
    model = Expense
    id_field = "expense_id"
    not_found_message = EXPENSE_NOT_FOUND
    order_by = "date"

    def before_create(self, fields: Dict[str, Any]) -> None:
        method_id = fields["payment_method_id"]
        if self.db.query(PaymentMethod.payment_method_id).filter(PaymentMethod.payment_method_id == method_id).first() is None:
            raise NotFoundError("Método de pago no encontrado.")

    def before_delete(self, obj: Expense) -> None:
        if obj.items:
            raise BusinessRuleError("No se puede eliminar un gasto que tiene items asociados.")

    def items_of(self, expense_id: str) -> List[ExpenseItem]:
        self.get_or_404(expense_id)
        return (
            self.db.query(ExpenseItem)
            .filter(ExpenseItem.expense_id == expense_id)
            .all()
        )


class ExpenseItemService(CrudService[ExpenseItem]):
    """Purchased lines. Creating one restocks the product; deleting one takes it back."""

    model = ExpenseItem
    id_field = "expense_item_id"
    not_found_message = "Item de gasto no encontrado."

    def __init__(self, db):
        super().__init__(db)
        self.ledger = StockLedger(db)

    def _require_product(self, product_id: str) -> None:
        if self.db.query(Product.product_id).filter(Product.product_id == product_id).first() is None:
            raise NotFoundError("Producto no encontrado.")

    def create(self, fields: Dict[str, Any]) -> ExpenseItem:
        if self.db.query(Expense.expense_id).filter(Expense.expense_id == fields["expense_id"]).first() is None:
            raise NotFoundError(EXPENSE_NOT_FOUND)
        self._require_product(fields["product_id"])

        quantity = fields["quantity"]
        unit_price = fields["unit_price"]
        with transaction(self.db):
            item = ExpenseItem(
                expense_id=fields["expense_id"],
                product_id=fields["product_id"],
                quantity=quantity,
                unit_price=unit_price,
                subtotal=quantity * unit_price,
            )
            self.db.add(item)
            self.ledger.restock(item.product_id, quantity, f"Gasto {item.expense_id}")
        self.db.refresh(item)
        return item

    def delete(self, obj_id: str) -> ExpenseItem:
        item = self.get_or_404(obj_id)
        self._require_product(item.product_id)
        product_id, quantity = item.product_id, item.quantity

        with transaction(self.db):
            self.db.delete(item)
            self.ledger.consume(product_id, quantity, f"Baja de item de gasto {obj_id}")
        logger.info("Deleted expense item %s, %d units taken back", obj_id, quantity)
        return item
