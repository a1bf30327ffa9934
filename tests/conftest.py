import os
from datetime import date

import pytest

# Force the app onto a throwaway database before anything imports the settings
os.environ['DATABASE_URL'] = 'sqlite://'

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from inventory_api.database import Base, get_db, seed_item_types
from inventory_api.main import app
from inventory_api.models import (
    Product, Category, Pack, PackItem, PaymentMethod, Expense, Order,
)

# One in-memory database shared by every connection of the test engine
engine = create_engine(
    'sqlite://',
    connect_args={'check_same_thread': False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope='function')
def session():
    """Fresh schema (with seeded item types) for every test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    seed_item_types(db)
    yield db
    db.rollback()
    db.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope='function')
def client(session):
    """Test client whose requests run on the test session."""
    def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def reload(session):
    """Read a row straight from the database, bypassing the identity map."""
    def _reload(model, obj_id):
        session.expire_all()
        return session.get(model, obj_id)
    return _reload


@pytest.fixture
def make_product(session):
    def _make(name='Widget', price=100.0, stock=0, **kwargs):
        product = Product(name=name, price=price, stock=stock, **kwargs)
        session.add(product)
        session.commit()
        return product
    return _make


@pytest.fixture
def make_category(session):
    def _make(name='Bebidas'):
        category = Category(name=name)
        session.add(category)
        session.commit()
        return category
    return _make


@pytest.fixture
def make_pack(session):
    """Pack with a recipe given as [(product, per_pack_quantity), ...]."""
    def _make(lines=(), name='Combo', price=250.0):
        pack = Pack(name=name, price=price)
        session.add(pack)
        session.flush()
        for product, quantity in lines:
            session.add(PackItem(pack_id=pack.pack_id, product_id=product.product_id, quantity=quantity))
        session.commit()
        return pack
    return _make


@pytest.fixture
def payment_method(session):
    method = PaymentMethod(name='Efectivo')
    session.add(method)
    session.commit()
    return method


@pytest.fixture
def order(session, payment_method):
    order = Order(payment_method_id=payment_method.payment_method_id)
    session.add(order)
    session.commit()
    return order


@pytest.fixture
def expense(session, payment_method):
    expense = Expense(date=date(2024, 5, 1), total=0.0, payment_method_id=payment_method.payment_method_id)
    session.add(expense)
    session.commit()
    return expense
