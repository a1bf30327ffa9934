import enum

from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Enum
from sqlalchemy.orm import relationship

from inventory_api.database import Base
from inventory_api.models.product import new_id
from inventory_api.utils.date import current_timestamp


# Movement classification
class StockMovementType(str, enum.Enum):
    IN = "IN"
    OUT = "OUT"
    ADJUSTMENT = "ADJUSTMENT"


# Audit trail of every stock change applied by the ledger
class StockMovement(Base):
    __tablename__ = "stock_movements"

    movement_id = Column(String(36), primary_key=True, default=new_id)
    product_id = Column(String(36), ForeignKey("products.product_id", ondelete="CASCADE"), nullable=False, index=True)

    # Signed quantity: positive for IN, negative for OUT
    qty = Column(Integer, nullable=False)
    type = Column(Enum(StockMovementType), nullable=False)
    reason = Column(String, nullable=True)

    created_at = Column(DateTime, nullable=False, default=current_timestamp, index=True)

    product = relationship("Product", back_populates="movements")
