"""Full shop flow over HTTP: stock a product by purchase, bundle it, sell the bundle."""

API = '/api/v1'


def _data(resp):
    return resp.json()['data']


def test_widget_combo_flow(client):
    method_id = _data(client.post(f'{API}/payment-methods/', json={'name': 'Efectivo'}))['payment_method_id']
    widget_id = _data(client.post(f'{API}/products/', json={'name': 'Widget', 'price': 100}))['product_id']

    # Purchase 5 widgets
    expense_id = _data(client.post(f'{API}/expenses/', json={
        'date': '2024-05-01', 'total': 250, 'payment_method_id': method_id,
    }))['expense_id']
    client.post(f'{API}/expense-items/', json={
        'expense_id': expense_id, 'product_id': widget_id, 'quantity': 5, 'unit_price': 50,
    })
    assert _data(client.get(f'{API}/products/{widget_id}'))['stock'] == 5

    # Combo = 2 widgets
    pack_id = _data(client.post(f'{API}/packs/', json={'name': 'Combo', 'price': 180}))['pack_id']
    client.post(f'{API}/packs/{pack_id}/items', json={'product_id': widget_id, 'quantity': 2})

    # 3 combos need 6 widgets, 2 combos need 4
    assert _data(client.get(f'{API}/packs/{pack_id}/availability?quantity=3'))['available'] is False
    assert _data(client.get(f'{API}/packs/{pack_id}/availability?quantity=2'))['available'] is True

    order_id = _data(client.post(f'{API}/orders/', json={'payment_method_id': method_id}))['order_id']
    rejected = client.post(f'{API}/detail-orders/', json={
        'order_id': order_id, 'item_type': 'pack', 'item_id': pack_id, 'quantity': 3,
    })
    sold = client.post(f'{API}/detail-orders/', json={
        'order_id': order_id, 'item_type': 'pack', 'item_id': pack_id, 'quantity': 2,
    })

    assert rejected.status_code == 400
    assert sold.status_code == 201
    assert _data(sold)['total_price'] == 360.0
    assert _data(client.get(f'{API}/products/{widget_id}'))['stock'] == 1

    movements = _data(client.get(f'{API}/stock-movements/', params={'product_id': widget_id}))
    assert sorted(m['qty'] for m in movements) == [-4, 5]

    outs = _data(client.get(f'{API}/stock-movements/', params={'type': 'OUT'}))
    assert [m['qty'] for m in outs] == [-4]
