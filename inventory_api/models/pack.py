from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from inventory_api.database import Base
from inventory_api.models.product import new_id
from inventory_api.utils.date import current_timestamp


# Bundle of products sold as a single order line.
class Pack(Base):
    __tablename__ = "packs"

    pack_id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False, index=True)
    description = Column(String, nullable=True)
    price = Column(Float, CheckConstraint("price >= 0"), nullable=False)
    picture = Column(String, nullable=True)
    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=current_timestamp)
    updated_at = Column(DateTime, nullable=False, default=current_timestamp, onupdate=current_timestamp)

    pack_items = relationship(
        "PackItem", back_populates="pack", cascade="all, delete-orphan",
        order_by="PackItem.created_at",
    )


# One recipe line of a pack: how many units of a product one pack requires.
# At most one line per (pack, product); additions are merged by the service.
class PackItem(Base):
    __tablename__ = "pack_items"

    pack_item_id = Column(String(36), primary_key=True, default=new_id)
    pack_id = Column(String(36), ForeignKey("packs.pack_id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(String(36), ForeignKey("products.product_id"), nullable=False, index=True)
    quantity = Column(Integer, CheckConstraint("quantity >= 1"), nullable=False)
    created_at = Column(DateTime, nullable=False, default=current_timestamp)
    updated_at = Column(DateTime, nullable=False, default=current_timestamp, onupdate=current_timestamp)

    pack = relationship("Pack", back_populates="pack_items")
    product = relationship("Product")
