"""Fill an empty database with a small demo shop: products, a pack, a purchase and a sale."""
from datetime import date

from inventory_api.database import SessionLocal, init_db
from inventory_api.models import Product, Category, ProductCategory, Pack, PaymentMethod, Order, ItemKind
from inventory_api.services.expenses import ExpenseService, ExpenseItemService
from inventory_api.services.orders import DetailOrderService
from inventory_api.services.packs import PackItemService

# Configuration
DEMO_PRODUCTS = [
    ("Alfajor de chocolate", 900.0, 0),
    ("Gaseosa cola 500ml", 1500.0, 0),
    ("Papas fritas 150g", 2100.0, 0),
    ("Agua mineral 500ml", 1000.0, 0),
]
DEMO_CATEGORIES = ["Golosinas", "Bebidas", "Snacks"]
DEMO_PAYMENT_METHODS = ["Efectivo", "Transferencia", "Tarjeta de débito"]
# End Configuration


def load_demo_data():
    session = SessionLocal()
    try:
        if session.query(Product).first() is not None:
            print("La base ya tiene productos, no se cargan datos de ejemplo.")
            return

        categories = [Category(name=name) for name in DEMO_CATEGORIES]
        methods = [PaymentMethod(name=name) for name in DEMO_PAYMENT_METHODS]
        products = [Product(name=name, price=price, stock=stock) for name, price, stock in DEMO_PRODUCTS]
        session.add_all(categories + methods + products)
        session.flush()

        links = [(0, 0), (1, 1), (2, 2), (3, 1)]
        session.add_all(
            ProductCategory(product_id=products[p].product_id, category_id=categories[c].category_id)
            for p, c in links
        )
        combo = Pack(name="Combo merienda", price=2200.0, description="Alfajor con gaseosa de 500ml")
        session.add(combo)
        session.commit()

        # Recipe: one alfajor and one soda per combo
        pack_items = PackItemService(session)
        pack_items.add(combo.pack_id, products[0].product_id, 1)
        pack_items.add(combo.pack_id, products[1].product_id, 1)

        # Initial purchase stocks every product through the ledger
        expense = ExpenseService(session).create({
            "date": date.today(),
            "total": 0.0,
            "location": "Mayorista",
            "payment_method_id": methods[0].payment_method_id,
            "notes": "Compra inicial",
        })
        expense_items = ExpenseItemService(session)
        total = 0.0
        for product in products:
            item = expense_items.create({
                "expense_id": expense.expense_id,
                "product_id": product.product_id,
                "quantity": 24,
                "unit_price": round(product.price * 0.6, 2),
            })
            total += item.subtotal
        ExpenseService(session).update(expense.expense_id, {"total": round(total, 2)})

        # One sale of a combo
        order = Order(payment_method_id=methods[0].payment_method_id)
        session.add(order)
        session.commit()
        DetailOrderService(session).create({
            "order_id": order.order_id,
            "item_type": ItemKind.PACK.value,
            "item_id": combo.pack_id,
            "quantity": 2,
        })

        print(f"Datos de ejemplo cargados: {len(products)} productos, 1 pack, 1 gasto, 1 orden.")
    finally:
        session.close()


if __name__ == "__main__":
    init_db()
    load_demo_data()
