# inventory_api/services/stock.py
import logging
from typing import Optional

from sqlalchemy import update
from sqlalchemy.orm import Session

from inventory_api.errors import NotFoundError, InsufficientStockError
from inventory_api.models.product import Product
from inventory_api.models.stock import StockMovement, StockMovementType
from inventory_api.utils.date import current_timestamp

logger = logging.getLogger(__name__)


class StockLedger:
    """
    Single entry point for changing a product's on-hand stock.

    Adjustments are relative, guarded SQL updates, so two concurrent sales
    can never both take the last unit. The ledger only flushes; the caller
    owns the transaction and decides when to commit.
    """

    def __init__(self, db: Session):
        self.db = db

    def has_sufficient_stock(self, product_id: str, quantity: int) -> bool:
        stock = self.db.query(Product.stock).filter(Product.product_id == product_id).scalar()
        if stock is None:
            return False
        return stock >= quantity

    def adjust_stock(
        self,
        product_id: str,
        delta: int,
        movement_type: Optional[StockMovementType] = None,
        reason: Optional[str] = None,
    ) -> None:
        if delta == 0:
            return

        # Pending ORM changes must reach the DB before the raw update
        self.db.flush()

        stmt = (
            update(Product)
            .where(Product.product_id == product_id)
            .values(stock=Product.stock + delta, updated_at=current_timestamp())
        )
        if delta < 0:
            stmt = stmt.where(Product.stock >= -delta)

        result = self.db.execute(stmt.execution_options(synchronize_session=False))
        if result.rowcount == 0:
            exists = self.db.query(Product.product_id).filter(Product.product_id == product_id).first()
            if exists is None:
                raise NotFoundError("Producto no encontrado.")
            logger.warning("Rejected stock change %+d for product %s: not enough stock", delta, product_id)
            raise InsufficientStockError(product_id=product_id)

        self._expire_cached(product_id)
        if movement_type is None:
            movement_type = StockMovementType.IN if delta > 0 else StockMovementType.OUT
        self.record_movement(product_id, delta, movement_type, reason)
        logger.info("Stock of product %s changed by %+d (%s)", product_id, delta, movement_type.value)

    def restock(self, product_id: str, quantity: int, reason: Optional[str] = None) -> None:
        self.adjust_stock(product_id, quantity, StockMovementType.IN, reason)

    def consume(self, product_id: str, quantity: int, reason: Optional[str] = None) -> None:
        self.adjust_stock(product_id, -quantity, StockMovementType.OUT, reason)

    def record_movement(
        self,
        product_id: str,
        qty: int,
        movement_type: StockMovementType,
        reason: Optional[str] = None,
    ) -> StockMovement:
        movement = StockMovement(product_id=product_id, qty=qty, type=movement_type, reason=reason)
        self.db.add(movement)
        return movement

    def _expire_cached(self, product_id: str) -> None:
        # A Product already loaded in this session still holds the old stock
        key = self.db.identity_key(Product, product_id)
        cached = self.db.identity_map.get(key)
        if cached is not None:
            self.db.expire(cached, ["stock", "updated_at"])
