"""Pytest fixtures for the order management tests."""

import asyncio
import os

import pytest

# Keep the application engine off PostgreSQL; every test overrides get_db anyway
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from main import app  # noqa: E402
from services.order_service.models import Order, OrderProduct  # noqa: E402
from services.product_service.models import Product  # noqa: E402
from shared.config.database import create_tables, get_db  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def engine(tmp_path):
    """A fresh SQLite database file per test.

    NullPool opens a new connection per session, so the engine can be used
    from the TestClient's event loop as well as from async tests.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'orders.db'}", poolclass=NullPool
    )
    asyncio.run(create_tables(engine))
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
async def db(session_factory, anyio_backend):
    async with session_factory() as session:
        yield session


@pytest.fixture
def api_client(session_factory):
    """Create a test client whose requests use the per-test database."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_product(db):
    async def _make_product(inventory, name="Widget"):
        product = Product(name=name, inventory=inventory)
        db.add(product)
        await db.commit()
        await db.refresh(product)
        return product

    return _make_product


@pytest.fixture
def make_order(db):
    async def _make_order(products=(), status="pending", customer_id=1):
        order = Order(customer_id=customer_id, status=status)
        db.add(order)
        await db.flush()
        db.add_all(OrderProduct(order_id=order.id, product_id=p.id) for p in products)
        await db.commit()
        await db.refresh(order)
        return order

    return _make_order
