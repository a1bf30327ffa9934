import enum

from sqlalchemy import Column, String, Enum

from inventory_api.database import Base


# Closed set of things an order line can reference
class ItemKind(str, enum.Enum):
    PRODUCT = "product"
    PACK = "pack"


# Discriminant row for polymorphic item references (detail orders).
# Seeded rows use the kind itself as identifier ("product", "pack").
class ItemType(Base):
    __tablename__ = "item_types"

    item_type_id = Column(String(36), primary_key=True)
    name = Column(Enum(ItemKind, values_callable=lambda kinds: [k.value for k in kinds]), nullable=False, unique=True)
