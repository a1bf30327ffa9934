from sqlalchemy import Column, String

from inventory_api.database import Base
from inventory_api.models.product import new_id


class PaymentMethod(Base):
    __tablename__ = "payment_methods"

    payment_method_id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
