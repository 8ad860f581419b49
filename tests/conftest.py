"""Shared fixtures: an in-memory catalog database and clients wired to it."""

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from fabricmarket.cart import CartStore
from fabricmarket.client import CatalogClient
from fabricmarket.database import Base, get_db
from fabricmarket.schemas import Product
from fabricmarket.seed import seed_products
from fabricmarket.store import CatalogStore
from fabricmarket.storefront import Storefront
from main import app

# StaticPool: every session shares the one in-memory connection
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function", autouse=True)
def setup_database():
    """Fresh, seeded products table for every test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        seed_products(db)
    finally:
        db.close()
    app.dependency_overrides[get_db] = override_get_db
    yield
    app.dependency_overrides.clear()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def api_client():
    return TestClient(app)


@pytest.fixture
def catalog_client():
    """CatalogClient that talks to the FastAPI app in-process."""
    return CatalogClient(base_url="http://testserver", transport=httpx.ASGITransport(app=app))


@pytest.fixture
def storefront(catalog_client):
    return Storefront(
        client=catalog_client,
        catalog=CatalogStore(catalog_client),
        cart=CartStore(),
    )


def make_product(id, price_per_meter=250, **overrides):
    data = {
        "id": id,
        "name": f"Fabric {id}",
        "fabric_type": "Cotton",
        "gsm": 150,
        "color": "White",
        "price_per_meter": price_per_meter,
        "stock": 10,
        "image_url": f"https://example.com/{id}.jpg",
    }
    data.update(overrides)
    return Product(**data)
