from inventory_api.models import Product, StockMovement, StockMovementType, PackItem, ProductCategory

API = '/api/v1'


def test_empty_collection_is_404(client):
    resp = client.get(f'{API}/products/')

    assert resp.status_code == 404
    body = resp.json()
    assert body['status'] == 'Operación fallida.'
    assert body['data'] == []


def test_create_and_list_products(client):
    resp = client.post(f'{API}/products/', json={'name': 'Widget', 'price': 100, 'stock': 5})

    assert resp.status_code == 201
    body = resp.json()
    assert body['status'] == 'Operación exitosa.'
    assert body['data']['name'] == 'Widget'
    assert body['data']['stock'] == 5
    assert body['data']['active'] is True

    listed = client.get(f'{API}/products/').json()['data']
    assert [p['name'] for p in listed] == ['Widget']
    assert listed[0]['categories'] == []


def test_validation_errors_list_fields(client):
    resp = client.post(f'{API}/products/', json={'name': 'W', 'price': -1, 'description': 'corta'})

    assert resp.status_code == 400
    fields = {e['field'] for e in resp.json()['data']['errors']}
    assert {'name', 'price', 'description'} <= fields


def test_malformed_id_is_400(client):
    resp = client.get(f'{API}/products/123')

    assert resp.status_code == 400
    assert resp.json()['data']['errors'][0]['message'] == 'Formato de ID inválido.'


def test_unknown_product_is_404(client):
    resp = client.get(f'{API}/products/3f2b8c1e-9d4a-4b6f-a1c2-7e5d9f0a1b2c')

    assert resp.status_code == 404
    assert resp.json()['message'] == 'Producto no encontrado.'


def test_product_lists_its_categories(client, session, make_product, make_category):
    product = make_product()
    category = make_category('Golosinas')
    session.add(ProductCategory(product_id=product.product_id, category_id=category.category_id))
    session.commit()

    data = client.get(f'{API}/products/{product.product_id}').json()['data']

    assert [c['name'] for c in data['categories']] == ['Golosinas']


def test_patch_stock_records_adjustment(client, session, make_product):
    product = make_product(stock=5)

    resp = client.patch(f'{API}/products/{product.product_id}', json={'stock': 8, 'price': 120})

    assert resp.status_code == 200
    assert resp.json()['data']['stock'] == 8
    assert resp.json()['data']['price'] == 120
    movement = session.query(StockMovement).one()
    assert movement.type == StockMovementType.ADJUSTMENT
    assert movement.qty == 3


def test_delete_product(client, session, make_product, make_category, reload):
    product = make_product()
    category = make_category()
    session.add(ProductCategory(product_id=product.product_id, category_id=category.category_id))
    session.commit()

    resp = client.delete(f'{API}/products/{product.product_id}')

    assert resp.status_code == 200
    assert reload(Product, product.product_id) is None
    assert session.query(ProductCategory).count() == 0


def test_delete_product_used_by_pack_is_rejected(client, session, make_product, make_pack, reload):
    product = make_product()
    make_pack([(product, 1)])

    resp = client.delete(f'{API}/products/{product.product_id}')

    assert resp.status_code == 400
    assert reload(Product, product.product_id) is not None
    assert session.query(PackItem).count() == 1


def test_bound_violations_have_spanish_messages(client):
    resp = client.post(f'{API}/products/', json={'name': 'W', 'price': -1})

    messages = {e['field']: e['message'] for e in resp.json()['data']['errors']}
    assert messages == {
        'name': 'Debe tener al menos 3 caracteres.',
        'price': 'El valor debe ser mayor o igual a 0.',
    }


def test_missing_field_message(client):
    resp = client.post(f'{API}/products/', json={'name': 'Widget'})

    assert resp.json()['data']['errors'] == [{'field': 'price', 'message': 'El campo es obligatorio.'}]


def test_patch_null_clears_picture_but_not_price(client, make_product):
    product = make_product(picture='widget.png')

    resp = client.patch(f'{API}/products/{product.product_id}', json={'picture': None, 'price': None})

    assert resp.status_code == 200
    assert resp.json()['data']['picture'] is None
    assert resp.json()['data']['price'] == 100.0
