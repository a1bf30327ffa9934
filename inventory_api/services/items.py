"""
Polymorphic order-line items.

A detail order points at an item through (item_type, item_id). The item
type row decides whether `item_id` lives in the products or the packs
table; everything that touches stock goes through `ResolvedItem` so each
kind is handled explicitly.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from sqlalchemy.orm import Session

from inventory_api.errors import NotFoundError
from inventory_api.models.item_type import ItemType, ItemKind
from inventory_api.models.pack import Pack
from inventory_api.models.product import Product
from inventory_api.services.packs import PackStockResolver
from inventory_api.services.stock import StockLedger

logger = logging.getLogger(__name__)

_MODELS = {
    ItemKind.PRODUCT: (Product, "product_id", "Producto no encontrado."),
    ItemKind.PACK: (Pack, "pack_id", "Pack no encontrado."),
}


@dataclass(frozen=True)
class ResolvedItem:
    kind: ItemKind
    entity: Union[Product, Pack]

    @property
    def item_id(self) -> str:
        return self.entity.product_id if self.kind is ItemKind.PRODUCT else self.entity.pack_id

    @property
    def price(self) -> float:
        return self.entity.price


class ItemRegistry:
    def __init__(self, db: Session):
        self.db = db
        self.ledger = StockLedger(db)
        self.packs = PackStockResolver(db, self.ledger)

    def resolve_kind(self, item_type_id: str) -> ItemKind:
        item_type = self.db.query(ItemType).filter(ItemType.item_type_id == item_type_id).first()
        if item_type is None:
            raise NotFoundError("Tipo de item no encontrado.")
        return ItemKind(item_type.name)

    def _load(self, kind: ItemKind, item_id: str):
        try:
            model, id_field, _ = _MODELS[kind]
        except KeyError:
            raise ValueError(f"Unknown item kind: {kind!r}")
        return self.db.query(model).filter(getattr(model, id_field) == item_id).first()

    def item_exists(self, item_id: str, kind: ItemKind) -> bool:
        return self._load(kind, item_id) is not None

    def resolve(self, item_type_id: str, item_id: str) -> ResolvedItem:
        kind = self.resolve_kind(item_type_id)
        entity = self._load(kind, item_id)
        if entity is None:
            raise NotFoundError(_MODELS[kind][2])
        return ResolvedItem(kind, entity)

    def has_sufficient_stock(self, item: ResolvedItem, quantity: int) -> bool:
        if item.kind is ItemKind.PRODUCT:
            return self.ledger.has_sufficient_stock(item.item_id, quantity)
        if item.kind is ItemKind.PACK:
            return self.packs.has_sufficient_stock(item.item_id, quantity)
        raise ValueError(f"Unknown item kind: {item.kind!r}")

    def consume(self, item: ResolvedItem, quantity: int, reason: Optional[str] = None) -> None:
        if item.kind is ItemKind.PRODUCT:
            self.ledger.consume(item.item_id, quantity, reason)
        elif item.kind is ItemKind.PACK:
            self.packs.consume(item.item_id, quantity, reason)
        else:
            raise ValueError(f"Unknown item kind: {item.kind!r}")

    def describe(self, item_type_id: str, item_id: str) -> Optional[Dict[str, Any]]:
        try:
            item = self.resolve(item_type_id, item_id)
        except NotFoundError:
            return None

        columns = item.entity.__table__.columns
        return {
            "item_type_id": item_type_id,
            "item_type_name": item.kind.value,
            "item_info": {c.key: getattr(item.entity, c.key) for c in columns},
        }
