"""
Pytest configuration and shared fixtures for flower-orders tests.
"""
import asyncio
import os
import tempfile
from datetime import datetime, timedelta, timezone

# Must be set before flower_orders.config is imported
_TMP_DIR = tempfile.mkdtemp(prefix="flower-orders-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["EVENTS_ENABLED"] = "false"

import pytest
from fastapi.testclient import TestClient
from unittest.mock import MagicMock

from flower_orders import models  # noqa: F401
from flower_orders.api.deps import get_catalog_client, get_clock, get_event_publisher
from flower_orders.database import Base, SessionLocal, engine
from flower_orders.main import app
from flower_orders.publishers.event_publisher import EventPublisher
from flower_orders.schemas.catalog import CatalogProduct
from flower_orders.services.catalog_client import ProductNotFoundError
from flower_orders.services.custom_request_service import CustomRequestService
from flower_orders.services.order_service import OrderService

# 15:30 in the store's timezone (Asia/Kolkata)
T0 = datetime(2026, 3, 10, 10, 0, tzinfo=timezone.utc)

ADMIN = {"X-User-Id": "admin", "X-User-Role": "ADMIN"}


def customer(user_id="cust-1"):
    return {"X-User-Id": user_id, "X-User-Role": "CUSTOMER"}


class FrozenClock:
    """Callable clock that only moves when told to"""

    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)
        return self.now


class FakeCatalog:
    """In-memory stand-in for the catalog service"""

    def __init__(self, products):
        self.products = {p.id: p for p in products}
        self.available = True

    async def get_product(self, product_id):
        if product_id not in self.products:
            raise ProductNotFoundError(f"Product {product_id} not found")
        return self.products[product_id]

    async def ping(self):
        return self.available

    def set_price(self, product_id, price):
        product = self.products[product_id]
        self.products[product_id] = product.model_copy(update={"price": price})


@pytest.fixture(autouse=True)
def reset_db():
    """Fresh schema for every test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def clock():
    return FrozenClock(T0)


@pytest.fixture
def catalog():
    return FakeCatalog([
        CatalogProduct(id="rose-bouquet", title="Red Rose Bouquet", price=500,
                       duration_hours=3, images=["rose.jpg", "rose-2.jpg"]),
        CatalogProduct(id="lily-basket", title="Lily Basket", price=800,
                       duration_hours=1, images=[]),
        CatalogProduct(id="wedding-garland", title="Wedding Garland", price=2500,
                       duration_hours=48, images=["garland.jpg"]),
    ])


@pytest.fixture
def publisher():
    return MagicMock(spec=EventPublisher)


@pytest.fixture
def order_service(db_session, catalog, publisher, clock):
    return OrderService(db_session, catalog=catalog, event_publisher=publisher, clock=clock)


@pytest.fixture
def custom_request_service(db_session, publisher, clock):
    return CustomRequestService(db_session, event_publisher=publisher, clock=clock, sla_hours=24)


@pytest.fixture
def place_order(order_service):
    """Place an order synchronously through the order ledger"""
    def _place(product_id="rose-bouquet", quantity=1, user_id="cust-1", **extra):
        payload = {"productId": product_id, "quantity": quantity, **extra}
        return asyncio.run(order_service.create(payload, user_id))
    return _place


def custom_payload(**overrides):
    payload = {
        "description": "Jasmine garland for a temple visit",
        "requestedDate": "2026-03-12",
        "requestedTime": "09:30",
        "contactName": "Meena",
        "contactPhone": "9876543210",
        "images": ["ref-1.jpg"],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def place_custom_request(custom_request_service):
    def _place(user_id="cust-1", **overrides):
        return custom_request_service.create(custom_payload(**overrides), user_id)
    return _place


@pytest.fixture
def client(catalog, publisher, clock):
    app.dependency_overrides[get_catalog_client] = lambda: catalog
    app.dependency_overrides[get_event_publisher] = lambda: publisher
    app.dependency_overrides[get_clock] = lambda: clock
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
