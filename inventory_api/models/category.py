from sqlalchemy import Column, String, DateTime, ForeignKey

from inventory_api.database import Base
from inventory_api.models.product import new_id
from inventory_api.utils.date import current_timestamp


class Category(Base):
    __tablename__ = "categories"

    category_id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    created_at = Column(DateTime, nullable=False, default=current_timestamp)
    updated_at = Column(DateTime, nullable=False, default=current_timestamp, onupdate=current_timestamp)


# Many-to-many link between products and categories (composite key)
class ProductCategory(Base):
    __tablename__ = "product_categories"

    product_id = Column(String(36), ForeignKey("products.product_id", ondelete="CASCADE"), primary_key=True)
    category_id = Column(String(36), ForeignKey("categories.category_id", ondelete="CASCADE"), primary_key=True)
