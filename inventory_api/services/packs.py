import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.orm import Session, selectinload

from inventory_api.database import transaction
from inventory_api.errors import NotFoundError, BusinessRuleError
from inventory_api.models.order import DetailOrder
from inventory_api.models.pack import Pack, PackItem
from inventory_api.models.product import Product
from inventory_api.services.crud import CrudService
from inventory_api.services.stock import StockLedger

logger = logging.getLogger(__name__)

PACK_NOT_FOUND = "Pack no encontrado."
PRODUCT_NOT_FOUND = "Producto no encontrado."


class PackService(CrudService[Pack]):
    model = Pack
    id_field = "pack_id"
    not_found_message = PACK_NOT_FOUND
    order_by = "name"

    def query(self):
        return super().query().options(selectinload(Pack.pack_items))

    def before_delete(self, obj: Pack) -> None:
        sold = (
            self.db.query(DetailOrder.order_detail_id)
            .filter(DetailOrder.item_id == obj.pack_id)
            .first()
        )
        if sold:
            raise BusinessRuleError("No se puede eliminar un pack que está en uso por órdenes.")


class PackStockResolver:
    """Turns pack quantities into product quantities through the pack's recipe."""

    def __init__(self, db: Session, ledger: Optional[StockLedger] = None):
        self.db = db
        self.ledger = ledger or StockLedger(db)

    def expand(self, pack_id: str) -> List[Tuple[str, int]]:
        rows = (
            self.db.query(PackItem.product_id, PackItem.quantity)
            .filter(PackItem.pack_id == pack_id)
            .order_by(PackItem.created_at)
            .all()
        )
        return [(product_id, quantity) for product_id, quantity in rows]

    def has_sufficient_stock(self, pack_id: str, pack_quantity: int) -> bool:
        for product_id, per_pack in self.expand(pack_id):
            if not self.ledger.has_sufficient_stock(product_id, pack_quantity * per_pack):
                return False
        return True

    def consume(self, pack_id: str, pack_quantity: int, reason: Optional[str] = None) -> None:
        # Any failing line raises; the caller's transaction undoes earlier lines
        for product_id, per_pack in self.expand(pack_id):
            self.ledger.consume(product_id, pack_quantity * per_pack, reason or f"Pack {pack_id}")

    def pack_products(self, pack_id: str) -> List[Dict[str, Any]]:
        rows = (
            self.db.query(PackItem, Product)
            .join(Product, Product.product_id == PackItem.product_id)
            .filter(PackItem.pack_id == pack_id)
            .order_by(PackItem.created_at)
            .all()
        )
        return [
            {
                "pack_item_id": item.pack_item_id,
                "product_id": product.product_id,
                "quantity": item.quantity,
                "product_name": product.name,
                "product_price": product.price,
                "product_stock": product.stock,
            }
            for item, product in rows
        ]


class PackItemService(CrudService[PackItem]):
    model = PackItem
    id_field = "pack_item_id"
    not_found_message = "Item de pack no encontrado."
    order_by = "created_at"

    def _require_pack(self, pack_id: str) -> None:
        if self.db.query(Pack.pack_id).filter(Pack.pack_id == pack_id).first() is None:
            raise NotFoundError(PACK_NOT_FOUND)

    def _require_product(self, product_id: str) -> None:
        if self.db.query(Product.product_id).filter(Product.product_id == product_id).first() is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)

    def _find_pair(self, pack_id: str, product_id: str) -> Optional[PackItem]:
        return (
            self.db.query(PackItem)
            .filter(PackItem.pack_id == pack_id, PackItem.product_id == product_id)
            .first()
        )

    def by_pack(self, pack_id: str) -> List[PackItem]:
        self._require_pack(pack_id)
        return (
            self.db.query(PackItem)
            .filter(PackItem.pack_id == pack_id)
            .order_by(PackItem.created_at)
            .all()
        )

    def _add(self, pack_id: str, product_id: str, quantity: int) -> Tuple[PackItem, bool]:
        self._require_pack(pack_id)
        self._require_product(product_id)

        existing = self._find_pair(pack_id, product_id)
        if existing is not None:
            existing.quantity = existing.quantity + quantity
            logger.info("Merged %d x product %s into pack %s", quantity, product_id, pack_id)
            return existing, False

        item = PackItem(pack_id=pack_id, product_id=product_id, quantity=quantity)
        self.db.add(item)
        # Later lines of the same batch must see this row
        self.db.flush()
        return item, True

    def add(self, pack_id: str, product_id: str, quantity: int) -> Tuple[PackItem, bool]:
        """Add a recipe line; returns (item, created). An existing pair is merged."""
        with transaction(self.db):
            item, created = self._add(pack_id, product_id, quantity)
        self.db.refresh(item)
        return item, created

    def add_many(self, lines: List[Dict[str, Any]]) -> Tuple[List[PackItem], bool]:
        """Add several lines in one transaction; `created` is True if any row is new."""
        results = []
        with transaction(self.db):
            for line in lines:
                results.append(self._add(line["pack_id"], line["product_id"], line["quantity"]))
        items = []
        for item, _ in results:
            self.db.refresh(item)
            if item not in items:
                items.append(item)
        return items, any(created for _, created in results)

    def update(self, obj_id: str, changes: Dict[str, Any]) -> PackItem:
        item = self.get_or_404(obj_id)
        if "pack_id" in changes:
            self._require_pack(changes["pack_id"])
        if "product_id" in changes:
            self._require_product(changes["product_id"])

        pack_id = changes.get("pack_id", item.pack_id)
        product_id = changes.get("product_id", item.product_id)
        other = self._find_pair(pack_id, product_id)
        if other is not None and other.pack_item_id != item.pack_item_id:
            raise BusinessRuleError("El producto ya forma parte de ese pack.")

        return super().update(obj_id, changes)
