from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from inventory_api.database import Base
from inventory_api.models.product import new_id
from inventory_api.utils.date import current_timestamp


# Sale header
class Order(Base):
    __tablename__ = "orders"

    order_id = Column(String(36), primary_key=True, default=new_id)
    date = Column(DateTime, nullable=False, default=current_timestamp)
    total = Column(Float, nullable=False, default=0.0)
    payment_method_id = Column(String(36), ForeignKey("payment_methods.payment_method_id"), nullable=False)
    created_at = Column(DateTime, nullable=False, default=current_timestamp)

    details = relationship(
        "DetailOrder", back_populates="order", cascade="all, delete-orphan",
        order_by="DetailOrder.created_at",
    )


# Sale line. `item_type` + `item_id` point at either a product or a pack;
# the item type row tells which table `item_id` belongs to.
class DetailOrder(Base):
    __tablename__ = "detail_orders"

    order_detail_id = Column(String(36), primary_key=True, default=new_id)
    order_id = Column(String(36), ForeignKey("orders.order_id"), nullable=False, index=True)
    item_type = Column(String(36), ForeignKey("item_types.item_type_id"), nullable=False)
    item_id = Column(String(36), nullable=False, index=True)
    quantity = Column(Integer, CheckConstraint("quantity >= 1"), nullable=False)
    unit_price = Column(Float, nullable=False)
    total_price = Column(Float, nullable=False)
    created_at = Column(DateTime, nullable=False, default=current_timestamp)

    order = relationship("Order", back_populates="details")
