import pytest

from inventory_api.database import transaction
from inventory_api.errors import InsufficientStockError
from inventory_api.models import Product, StockMovement
from inventory_api.services.packs import PackStockResolver


def test_expand_lists_recipe_lines(session, make_product, make_pack):
    a = make_product(name='Alfajor', stock=10)
    b = make_product(name='Gaseosa', stock=10)
    pack = make_pack([(a, 1), (b, 2)])

    lines = PackStockResolver(session).expand(pack.pack_id)

    assert sorted(lines) == sorted([(a.product_id, 1), (b.product_id, 2)])


def test_sufficient_stock_scales_with_pack_quantity(session, make_product, make_pack):
    widget = make_product(stock=5)
    pack = make_pack([(widget, 2)])
    resolver = PackStockResolver(session)

    assert resolver.has_sufficient_stock(pack.pack_id, 2) is True
    assert resolver.has_sufficient_stock(pack.pack_id, 3) is False


def test_empty_pack_is_always_available(session, make_pack):
    pack = make_pack([])

    assert PackStockResolver(session).has_sufficient_stock(pack.pack_id, 100) is True


def test_consume_takes_every_line(session, make_product, make_pack, reload):
    a = make_product(name='Alfajor', stock=10)
    b = make_product(name='Gaseosa', stock=10)
    pack = make_pack([(a, 1), (b, 3)])

    with transaction(session):
        PackStockResolver(session).consume(pack.pack_id, 2)

    assert reload(Product, a.product_id).stock == 8
    assert reload(Product, b.product_id).stock == 4
    assert session.query(StockMovement).count() == 2


def test_consume_is_all_or_nothing(session, make_product, make_pack, reload):
    plenty = make_product(name='Alfajor', stock=10)
    scarce = make_product(name='Gaseosa', stock=1)
    pack = make_pack([(plenty, 1), (scarce, 2)])

    with pytest.raises(InsufficientStockError):
        with transaction(session):
            PackStockResolver(session).consume(pack.pack_id, 1)

    assert reload(Product, plenty.product_id).stock == 10
    assert reload(Product, scarce.product_id).stock == 1
    assert session.query(StockMovement).count() == 0


def test_pack_products_joins_product_data(session, make_product, make_pack):
    widget = make_product(name='Widget', price=40.0, stock=7)
    pack = make_pack([(widget, 2)])

    rows = PackStockResolver(session).pack_products(pack.pack_id)

    assert len(rows) == 1
    assert rows[0]['product_name'] == 'Widget'
    assert rows[0]['product_price'] == 40.0
    assert rows[0]['product_stock'] == 7
    assert rows[0]['quantity'] == 2
