# inventory_api/models/product.py
import uuid

from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, CheckConstraint
from sqlalchemy.orm import relationship

from inventory_api.database import Base
from inventory_api.utils.date import current_timestamp


def new_id() -> str:
    return str(uuid.uuid4())


# Product sold on its own or as part of a pack.
# `stock` is the on-hand quantity; outside direct edits it only changes
# through the stock ledger (expense items, sales).
class Product(Base):
    __tablename__ = "products"

    product_id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False, index=True)
    description = Column(String, nullable=True)

    price = Column(Float, CheckConstraint("price >= 0"), nullable=False)
    stock = Column(Integer, CheckConstraint("stock >= 0"), nullable=False, default=0)

    # Optional picture URL
    picture = Column(String, nullable=True)
    active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime, nullable=False, default=current_timestamp)
    updated_at = Column(DateTime, nullable=False, default=current_timestamp, onupdate=current_timestamp)

    categories = relationship("Category", secondary="product_categories", order_by="Category.name", viewonly=True)
    movements = relationship("StockMovement", back_populates="product", cascade="all, delete-orphan")
