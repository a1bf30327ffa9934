from inventory_api.models.product import Product
from inventory_api.models.category import Category, ProductCategory
from inventory_api.models.pack import Pack, PackItem
from inventory_api.models.item_type import ItemType, ItemKind
from inventory_api.models.payment_method import PaymentMethod
from inventory_api.models.expense import Expense, ExpenseItem
from inventory_api.models.order import Order, DetailOrder
from inventory_api.models.stock import StockMovement, StockMovementType

__all__ = [
    'Product', 'Category', 'ProductCategory', 'Pack', 'PackItem',
    'ItemType', 'ItemKind', 'PaymentMethod', 'Expense', 'ExpenseItem',
    'Order', 'DetailOrder', 'StockMovement', 'StockMovementType',
]
