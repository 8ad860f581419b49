"""
Catalog Service endpoints: GET /products and GET /products/{id}.
"""

import pytest
from sqlalchemy.exc import SQLAlchemyError

from fabricmarket.database import get_db
from main import app


class BrokenSession:
    def scalars(self, *args, **kwargs):
        raise SQLAlchemyError("database is down")

    def get(self, *args, **kwargs):
        raise SQLAlchemyError("database is down")


@pytest.fixture
def broken_db():
    def _broken():
        yield BrokenSession()
    app.dependency_overrides[get_db] = _broken


class TestListProducts:
    def test_returns_whole_seed_catalog(self, api_client):
        resp = api_client.get("/products")
        assert resp.status_code == 200
        assert len(resp.json()) == 10

    def test_newest_first(self, api_client):
        ids = [p["id"] for p in api_client.get("/products").json()]
        assert ids == list(range(10, 0, -1))

    def test_camel_case_fields(self, api_client):
        product = api_client.get("/products").json()[-1]
        assert product["name"] == "Premium Cotton Fabric"
        assert product["fabricType"] == "Cotton"
        assert product["pricePerMeter"] == 250
        assert product["imageUrl"].startswith("https://")
        assert "createdAt" in product
        assert "fabric_type" not in product

    def test_query_parameters_do_not_filter(self, api_client):
        resp = api_client.get("/products", params={"fabricType": "Silk"})
        assert len(resp.json()) == 10

    def test_persistence_error_maps_to_500(self, api_client, broken_db):
        resp = api_client.get("/products")
        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to fetch products"}


class TestGetProduct:
    def test_found(self, api_client):
        resp = api_client.get("/products/2")
        assert resp.status_code == 200
        body = resp.json()
        assert body["id"] == 2
        assert body["name"] == "Silk Blend Fabric"
        assert body["color"] == "Cream"
        assert body["pricePerMeter"] == 850

    def test_missing_is_404(self, api_client):
        resp = api_client.get("/products/999")
        assert resp.status_code == 404
        assert resp.json() == {"error": "Product not found"}

    def test_non_integer_id_rejected(self, api_client):
        resp = api_client.get("/products/abc")
        assert resp.status_code == 422

    def test_persistence_error_maps_to_500(self, api_client, broken_db):
        resp = api_client.get("/products/1")
        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to fetch product"}


def test_health(api_client):
    assert api_client.get("/health").json() == {"status": "ok"}
