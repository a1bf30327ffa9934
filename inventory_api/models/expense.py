from sqlalchemy import Column, Integer, String, Float, Date, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from inventory_api.database import Base
from inventory_api.models.product import new_id
from inventory_api.utils.date import current_timestamp


# Purchase / restock event paid with one payment method
class Expense(Base):
    __tablename__ = "expenses"

    expense_id = Column(String(36), primary_key=True, default=new_id)
    date = Column(Date, nullable=False)
    total = Column(Float, CheckConstraint("total >= 0"), nullable=False)
    location = Column(String, nullable=True)
    payment_method_id = Column(String(36), ForeignKey("payment_methods.payment_method_id"), nullable=False)
    notes = Column(String, nullable=True)
    created_at = Column(DateTime, nullable=False, default=current_timestamp)

    items = relationship("ExpenseItem", back_populates="expense")
    payment_method = relationship("PaymentMethod")


# Purchased line; creating one adds `quantity` to the product's stock
class ExpenseItem(Base):
    __tablename__ = "expense_items"

    expense_item_id = Column(String(36), primary_key=True, default=new_id)
    expense_id = Column(String(36), ForeignKey("expenses.expense_id"), nullable=False, index=True)
    product_id = Column(String(36), ForeignKey("products.product_id"), nullable=False, index=True)
    quantity = Column(Integer, CheckConstraint("quantity >= 1"), nullable=False)
    unit_price = Column(Float, CheckConstraint("unit_price >= 0"), nullable=False)
    # quantity * unit_price, computed server-side
    subtotal = Column(Float, nullable=False)

    expense = relationship("Expense", back_populates="items")
    product = relationship("Product")
