"""
CatalogClient error mapping, driven by httpx.MockTransport.
"""

import httpx
import pytest

from fabricmarket.client import CatalogClient
from fabricmarket.errors import FetchError, ProductNotFound

PRODUCT = {
    "id": 1,
    "name": "Premium Cotton Fabric",
    "fabricType": "Cotton",
    "gsm": 150,
    "color": "White",
    "pricePerMeter": 250,
    "stock": 100,
    "imageUrl": "https://example.com/1.jpg",
}


def client_for(handler):
    return CatalogClient(base_url="http://catalog.test", transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_fetch_products_parses_camel_case():
    client = client_for(lambda request: httpx.Response(200, json=[PRODUCT]))
    products = await client.fetch_products()
    assert len(products) == 1
    assert products[0].fabric_type == "Cotton"
    assert products[0].price_per_meter == 250


@pytest.mark.asyncio
async def test_fetch_products_hits_products_path():
    seen = []

    def handler(request):
        seen.append(request.url.path)
        return httpx.Response(200, json=[])

    await client_for(handler).fetch_products()
    assert seen == ["/products"]


@pytest.mark.asyncio
async def test_server_error_is_fetch_error():
    client = client_for(lambda request: httpx.Response(500, json={"error": "Failed to fetch products"}))
    with pytest.raises(FetchError) as exc_info:
        await client.fetch_products()
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_transport_failure_is_fetch_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FetchError) as exc_info:
        await client_for(handler).fetch_products()
    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_timeout_is_fetch_error():
    def handler(request):
        raise httpx.ReadTimeout("too slow", request=request)

    with pytest.raises(FetchError):
        await client_for(handler).fetch_products()


@pytest.mark.asyncio
async def test_non_json_body_is_fetch_error():
    client = client_for(lambda request: httpx.Response(200, text="<html>oops</html>"))
    with pytest.raises(FetchError):
        await client.fetch_products()


@pytest.mark.asyncio
async def test_malformed_product_is_fetch_error():
    bad = dict(PRODUCT, pricePerMeter=-5)
    client = client_for(lambda request: httpx.Response(200, json=[bad]))
    with pytest.raises(FetchError):
        await client.fetch_products()


@pytest.mark.asyncio
async def test_fetch_product():
    client = client_for(lambda request: httpx.Response(200, json=PRODUCT))
    product = await client.fetch_product(1)
    assert product.id == 1
    assert product.name == "Premium Cotton Fabric"


@pytest.mark.asyncio
async def test_fetch_product_404_is_not_found():
    client = client_for(lambda request: httpx.Response(404, json={"error": "Product not found"}))
    with pytest.raises(ProductNotFound) as exc_info:
        await client.fetch_product(99)
    assert exc_info.value.product_id == 99


@pytest.mark.asyncio
async def test_product_is_immutable():
    client = client_for(lambda request: httpx.Response(200, json=PRODUCT))
    product = await client.fetch_product(1)
    with pytest.raises(Exception):
        product.price_per_meter = 1
