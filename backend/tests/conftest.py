from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from inventoryhub.core.config import Settings
from inventoryhub.core.store import ProductStore
from inventoryhub.main import create_app
from inventoryhub.models.product import Product
from inventoryhub.seed import seed_products
from inventoryhub.services.products import ProductService


class StepClock:
    """Returns a strictly later UTC time on every call."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


class ManualClock:
    """Monotonic clock that only moves when the test says so."""

    def __init__(self):
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_product(name="Widget", price="9.99", stock=0, reorder=1, **extra) -> Product:
    return Product(
        name=name,
        price=Decimal(price),
        stock_quantity=stock,
        reorder_level=reorder,
        **extra,
    )


@pytest.fixture
def store():
    return ProductStore(clock=StepClock())


@pytest.fixture
def seeded_store(store):
    seed_products(store)
    return store


@pytest.fixture
def service(seeded_store):
    return ProductService(seeded_store)


@pytest.fixture
def test_settings():
    return Settings(OPERATION_LATENCY_SECONDS=0, SEED_ON_STARTUP=True, CORS_ORIGINS=["*"])


@pytest.fixture
def app(test_settings):
    return create_app(test_settings, store=ProductStore())


@pytest.fixture
def http(app):
    with TestClient(app) as client:
        yield client
