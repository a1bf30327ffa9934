from typing import Any, Dict

from inventory_api.errors import BusinessRuleError
from inventory_api.models.category import Category, ProductCategory
from inventory_api.models.expense import Expense
from inventory_api.models.item_type import ItemType
from inventory_api.models.order import Order, DetailOrder
from inventory_api.models.payment_method import PaymentMethod
from inventory_api.models.product import new_id
from inventory_api.services.crud import CrudService


class CategoryService(CrudService[Category]):
    model = Category
    id_field = "category_id"
    not_found_message = "Categoría no encontrada."
    order_by = "name"

    def before_delete(self, obj: Category) -> None:
        self.db.query(ProductCategory).filter(
            ProductCategory.category_id == obj.category_id
        ).delete(synchronize_session=False)


class PaymentMethodService(CrudService[PaymentMethod]):
    model = PaymentMethod
    id_field = "payment_method_id"
    not_found_message = "Método de pago no encontrado."
    order_by = "name"

    def before_delete(self, obj: PaymentMethod) -> None:
        mid = obj.payment_method_id
        if (
            self.db.query(Expense.expense_id).filter(Expense.payment_method_id == mid).first()
            or self.db.query(Order.order_id).filter(Order.payment_method_id == mid).first()
        ):
            raise BusinessRuleError("No se puede eliminar un método de pago en uso.")


class ItemTypeService(CrudService[ItemType]):
    model = ItemType
    id_field = "item_type_id"
    not_found_message = "Tipo de item no encontrado."

    def _check_unique(self, name, exclude_id=None) -> None:
        q = self.db.query(ItemType).filter(ItemType.name == name)
        if exclude_id:
            q = q.filter(ItemType.item_type_id != exclude_id)
        if q.first() is not None:
            raise BusinessRuleError("Ya existe un tipo de item con ese nombre.")

    def before_create(self, fields: Dict[str, Any]) -> None:
        self._check_unique(fields["name"])
        fields.setdefault("item_type_id", new_id())

    def update(self, obj_id: str, changes: Dict[str, Any]) -> ItemType:
        if "name" in changes:
            self.get_or_404(obj_id)
            self._check_unique(changes["name"], exclude_id=obj_id)
        return super().update(obj_id, changes)

    def before_delete(self, obj: ItemType) -> None:
        if self.db.query(DetailOrder.order_detail_id).filter(DetailOrder.item_type == obj.item_type_id).first():
            raise BusinessRuleError("No se puede eliminar un tipo de item usado por detalles de orden.")
