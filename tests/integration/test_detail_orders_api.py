from inventory_api.models import Product, DetailOrder, Order, StockMovement, StockMovementType

API = '/api/v1'


def _sell(client, order, item_type, item_id, quantity, **extra):
    return client.post(f'{API}/detail-orders/', json={
        'order_id': order.order_id,
        'item_type': item_type,
        'item_id': item_id,
        'quantity': quantity,
        **extra,
    })


def test_product_sale_consumes_stock(client, session, order, make_product, reload):
    widget = make_product(price=100.0, stock=5)

    resp = _sell(client, order, 'product', widget.product_id, 2)

    assert resp.status_code == 201
    data = resp.json()['data']
    assert data['unit_price'] == 100.0
    assert data['total_price'] == 200.0
    assert reload(Product, widget.product_id).stock == 3
    movement = session.query(StockMovement).one()
    assert movement.type == StockMovementType.OUT
    assert movement.qty == -2


def test_explicit_unit_price(client, order, make_product):
    widget = make_product(price=100.0, stock=5)

    data = _sell(client, order, 'product', widget.product_id, 3, unit_price=80).json()['data']

    assert data['unit_price'] == 80.0
    assert data['total_price'] == 240.0


def test_rejected_sale_changes_nothing(client, session, order, make_product, reload):
    widget = make_product(stock=1)

    resp = _sell(client, order, 'product', widget.product_id, 2)

    assert resp.status_code == 400
    assert reload(Product, widget.product_id).stock == 1
    assert session.query(DetailOrder).count() == 0
    assert session.query(StockMovement).count() == 0


def test_pack_sale_consumes_every_component(client, order, make_product, make_pack, reload):
    a = make_product(name='Alfajor', stock=10)
    b = make_product(name='Gaseosa', stock=10)
    pack = make_pack([(a, 1), (b, 2)], price=250.0)

    resp = _sell(client, order, 'pack', pack.pack_id, 3)

    assert resp.status_code == 201
    assert resp.json()['data']['total_price'] == 750.0
    assert reload(Product, a.product_id).stock == 7
    assert reload(Product, b.product_id).stock == 4


def test_pack_sale_short_on_one_component(client, session, order, make_product, make_pack, reload):
    a = make_product(name='Alfajor', stock=10)
    b = make_product(name='Gaseosa', stock=1)
    pack = make_pack([(a, 1), (b, 2)])

    resp = _sell(client, order, 'pack', pack.pack_id, 1)

    assert resp.status_code == 400
    assert reload(Product, a.product_id).stock == 10
    assert reload(Product, b.product_id).stock == 1
    assert session.query(DetailOrder).count() == 0


def test_unknown_item_is_404(client, order, make_pack):
    pack = make_pack([])

    # A pack id used as a product
    resp = _sell(client, order, 'product', pack.pack_id, 1)

    assert resp.status_code == 404
    assert resp.json()['message'] == 'Producto no encontrado.'


def test_detail_with_item_info(client, order, make_product):
    widget = make_product(name='Widget', stock=5)
    detail_id = _sell(client, order, 'product', widget.product_id, 1).json()['data']['order_detail_id']

    data = client.get(f'{API}/detail-orders/{detail_id}/with-item-info').json()['data']

    assert data['item_details']['item_type_name'] == 'product'
    assert data['item_details']['item_info']['name'] == 'Widget'


def test_deleting_detail_does_not_restore_stock(client, order, make_product, reload):
    widget = make_product(stock=5)
    detail_id = _sell(client, order, 'product', widget.product_id, 2).json()['data']['order_detail_id']

    assert client.delete(f'{API}/detail-orders/{detail_id}').status_code == 200
    assert reload(Product, widget.product_id).stock == 3


def test_order_with_details_and_cascade_delete(client, session, order, make_product, reload):
    widget = make_product(stock=5)
    _sell(client, order, 'product', widget.product_id, 1)

    details = client.get(f'{API}/orders/{order.order_id}/with-details').json()['data']['details']
    assert len(details) == 1
    assert len(client.get(f'{API}/detail-orders/order/{order.order_id}').json()['data']) == 1

    assert client.delete(f'{API}/orders/{order.order_id}').status_code == 200
    assert reload(Order, order.order_id) is None
    assert session.query(DetailOrder).count() == 0
