from inventory_api.models import Product, ExpenseItem, StockMovement, StockMovementType

API = '/api/v1'


def test_create_expense(client, payment_method):
    resp = client.post(f'{API}/expenses/', json={
        'date': '2024-05-01',
        'total': 1500,
        'location': 'Mayorista',
        'payment_method_id': payment_method.payment_method_id,
    })

    assert resp.status_code == 201
    assert resp.json()['data']['date'] == '2024-05-01'


def test_create_expense_bad_date(client, payment_method):
    resp = client.post(f'{API}/expenses/', json={
        'date': '01/05/2024',
        'total': 10,
        'payment_method_id': payment_method.payment_method_id,
    })

    assert resp.status_code == 400
    assert resp.json()['data']['errors'][0]['field'] == 'date'


def test_create_expense_unknown_payment_method(client):
    resp = client.post(f'{API}/expenses/', json={
        'date': '2024-05-01',
        'total': 10,
        'payment_method_id': '3f2b8c1e-9d4a-4b6f-a1c2-7e5d9f0a1b2c',
    })

    assert resp.status_code == 404


def test_expense_item_round_trip(client, session, expense, make_product, reload):
    widget = make_product(stock=5)

    created = client.post(f'{API}/expense-items/', json={
        'expense_id': expense.expense_id,
        'product_id': widget.product_id,
        'quantity': 10,
        'unit_price': 2.5,
    })

    assert created.status_code == 201
    assert created.json()['data']['subtotal'] == 25.0
    assert reload(Product, widget.product_id).stock == 15

    item_id = created.json()['data']['expense_item_id']
    deleted = client.delete(f'{API}/expense-items/{item_id}')

    assert deleted.status_code == 200
    assert reload(Product, widget.product_id).stock == 5
    types = [m.type for m in session.query(StockMovement).order_by(StockMovement.created_at).all()]
    assert sorted(types) == sorted([StockMovementType.IN, StockMovementType.OUT])


def test_expense_item_for_unknown_expense_is_404(client, make_product):
    widget = make_product()

    resp = client.post(f'{API}/expense-items/', json={
        'expense_id': '3f2b8c1e-9d4a-4b6f-a1c2-7e5d9f0a1b2c',
        'product_id': widget.product_id,
        'quantity': 1,
        'unit_price': 1,
    })

    assert resp.status_code == 404
    assert resp.json()['message'] == 'Gasto no encontrado.'


def test_cannot_delete_expense_item_after_stock_was_sold(client, session, expense, make_product, reload):
    widget = make_product(stock=0)
    item_id = client.post(f'{API}/expense-items/', json={
        'expense_id': expense.expense_id,
        'product_id': widget.product_id,
        'quantity': 3,
        'unit_price': 1,
    }).json()['data']['expense_item_id']
    client.patch(f'{API}/products/{widget.product_id}', json={'stock': 1})

    resp = client.delete(f'{API}/expense-items/{item_id}')

    assert resp.status_code == 400
    assert reload(ExpenseItem, item_id) is not None
    assert reload(Product, widget.product_id).stock == 1


def test_expense_with_items_cannot_be_deleted(client, session, expense, make_product):
    widget = make_product()
    client.post(f'{API}/expense-items/', json={
        'expense_id': expense.expense_id,
        'product_id': widget.product_id,
        'quantity': 1,
        'unit_price': 1,
    })

    assert client.delete(f'{API}/expenses/{expense.expense_id}').status_code == 400
    assert len(client.get(f'{API}/expenses/{expense.expense_id}/items').json()['data']) == 1
