from inventory_api.models import Pack, PackItem

API = '/api/v1'


def test_create_pack_and_add_items(client, make_product):
    widget = make_product(stock=5)
    pack_id = client.post(f'{API}/packs/', json={'name': 'Combo', 'price': 250}).json()['data']['pack_id']

    resp = client.post(f'{API}/packs/{pack_id}/items', json={'product_id': widget.product_id, 'quantity': 2})

    assert resp.status_code == 201
    assert resp.json()['data']['quantity'] == 2

    pack = client.get(f'{API}/packs/{pack_id}').json()['data']
    assert [i['product_id'] for i in pack['pack_items']] == [widget.product_id]


def test_adding_same_product_merges_quantity(client, session, make_product, make_pack):
    widget = make_product()
    pack = make_pack([])
    line = {'pack_id': pack.pack_id, 'product_id': widget.product_id, 'quantity': 2}

    first = client.post(f'{API}/pack-items/', json=line)
    second = client.post(f'{API}/pack-items/', json={**line, 'quantity': 3})

    assert first.status_code == 201
    assert second.status_code == 200
    assert second.json()['data']['quantity'] == 5
    assert session.query(PackItem).count() == 1


def test_pack_items_accepts_a_list(client, session, make_product, make_pack):
    a = make_product(name='Alfajor')
    b = make_product(name='Gaseosa')
    pack = make_pack([])

    resp = client.post(f'{API}/pack-items/', json=[
        {'pack_id': pack.pack_id, 'product_id': a.product_id, 'quantity': 1},
        {'pack_id': pack.pack_id, 'product_id': b.product_id, 'quantity': 1},
        {'pack_id': pack.pack_id, 'product_id': a.product_id, 'quantity': 1},
    ])

    assert resp.status_code == 201
    assert len(resp.json()['data']) == 2
    quantities = {i.product_id: i.quantity for i in session.query(PackItem).all()}
    assert quantities == {a.product_id: 2, b.product_id: 1}


def test_add_item_to_unknown_pack(client, make_product):
    widget = make_product()

    resp = client.post(f'{API}/pack-items/', json={
        'pack_id': '3f2b8c1e-9d4a-4b6f-a1c2-7e5d9f0a1b2c',
        'product_id': widget.product_id,
        'quantity': 1,
    })

    assert resp.status_code == 404
    assert resp.json()['message'] == 'Pack no encontrado.'


def test_update_cannot_duplicate_a_pair(client, session, make_product, make_pack):
    a = make_product(name='Alfajor')
    b = make_product(name='Gaseosa')
    pack = make_pack([(a, 1), (b, 1)])
    item_b = session.query(PackItem).filter(PackItem.product_id == b.product_id).one()

    resp = client.put(f'{API}/pack-items/{item_b.pack_item_id}', json={'product_id': a.product_id})

    assert resp.status_code == 400


def test_update_quantity(client, session, make_product, make_pack):
    widget = make_product()
    make_pack([(widget, 1)])
    item = session.query(PackItem).one()

    resp = client.put(f'{API}/pack-items/{item.pack_item_id}', json={'quantity': 4})

    assert resp.status_code == 200
    assert resp.json()['data']['quantity'] == 4


def test_availability_and_products(client, make_product, make_pack):
    widget = make_product(name='Widget', stock=5)
    pack = make_pack([(widget, 2)])

    ok = client.get(f'{API}/packs/{pack.pack_id}/availability', params={'quantity': 2}).json()['data']
    short = client.get(f'{API}/packs/{pack.pack_id}/availability', params={'quantity': 3}).json()['data']
    products = client.get(f'{API}/packs/{pack.pack_id}/products').json()['data']

    assert ok['available'] is True
    assert short['available'] is False
    assert products[0]['product_name'] == 'Widget'
    assert products[0]['quantity'] == 2


def test_items_by_pack(client, make_product, make_pack):
    widget = make_product()
    pack = make_pack([(widget, 1)])
    empty = make_pack([], name='Vacío')

    assert len(client.get(f'{API}/pack-items/pack/{pack.pack_id}').json()['data']) == 1
    assert client.get(f'{API}/pack-items/pack/{empty.pack_id}').status_code == 404


def test_delete_pack_removes_its_items(client, session, make_product, make_pack, reload):
    widget = make_product()
    pack = make_pack([(widget, 1)])

    resp = client.delete(f'{API}/packs/{pack.pack_id}')

    assert resp.status_code == 200
    assert reload(Pack, pack.pack_id) is None
    assert session.query(PackItem).count() == 0


def test_delete_sold_pack_is_rejected(client, session, order, make_product, make_pack, reload):
    widget = make_product(stock=4)
    pack = make_pack([(widget, 2)])
    sold = client.post(f'{API}/detail-orders/', json={
        'order_id': order.order_id, 'item_type': 'pack', 'item_id': pack.pack_id, 'quantity': 1,
    })
    assert sold.status_code == 201

    resp = client.delete(f'{API}/packs/{pack.pack_id}')

    assert resp.status_code == 400
    assert resp.json()['message'] == 'No se puede eliminar un pack que está en uso por órdenes.'
    assert reload(Pack, pack.pack_id) is not None
    assert session.query(PackItem).count() == 1


def test_quantity_bound_message_is_localized(client, session, make_product, make_pack):
    widget = make_product()
    make_pack([(widget, 1)])
    item = session.query(PackItem).one()

    resp = client.put(f'{API}/pack-items/{item.pack_item_id}', json={'quantity': 0})

    assert resp.status_code == 400
    assert resp.json()['data']['errors'] == [
        {'field': 'quantity', 'message': 'El valor debe ser mayor o igual a 1.'},
    ]


def test_patch_null_clears_optional_fields(client, make_pack):
    pack = make_pack([])
    client.patch(f'{API}/packs/{pack.pack_id}', json={'description': 'Alfajor con gaseosa', 'picture': 'combo.png'})

    resp = client.patch(f'{API}/packs/{pack.pack_id}', json={'description': None, 'name': None})

    assert resp.status_code == 200
    data = resp.json()['data']
    assert data['description'] is None
    assert data['picture'] == 'combo.png'
    assert data['name'] == 'Combo'
