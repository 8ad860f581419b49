"""
Catalog Service client: storefront -> backend over HTTP.

Every failure on the way (transport, timeout, non-2xx, undecodable body) is
raised as FetchError; a 404 on a single product is ProductNotFound. There is
no retry: callers decide whether to ask again.
"""
from typing import List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from .config import CATALOG_API_URL, CATALOG_REQUEST_TIMEOUT
from .errors import FetchError, ProductNotFound
from .logger import get_logger
from .schemas import Product

logger = get_logger("client")

_product_list = TypeAdapter(List[Product])


class CatalogClient:
    def __init__(
        self,
        base_url: str = CATALOG_API_URL,
        timeout: float = CATALOG_REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        # injectable so tests can answer with httpx.MockTransport
        self._transport = transport

    async def _get_json(self, path: str):
        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.get(url)
        except httpx.RequestError as e:
            logger.error("GET %s failed: %s", url, e)
            raise FetchError(f"Catalog service unreachable: {e}") from e

        if resp.status_code == 404:
            return resp, None

        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("GET %s -> HTTP %s body=%s", url, resp.status_code, resp.text[:500])
            raise FetchError(f"Catalog service answered {resp.status_code}", status_code=resp.status_code) from e

        try:
            return resp, resp.json()
        except ValueError as e:
            logger.error("GET %s returned a body that is not JSON", url)
            raise FetchError("Catalog service sent an unreadable body", status_code=resp.status_code) from e

    async def fetch_products(self) -> List[Product]:
        """GET /products: the whole catalog, newest first."""
        resp, data = await self._get_json("/products")
        if data is None:
            raise FetchError("Catalog endpoint not found", status_code=resp.status_code)
        try:
            return _product_list.validate_python(data)
        except ValidationError as e:
            logger.error("Product list failed validation: %s", e)
            raise FetchError("Catalog service sent malformed products", status_code=resp.status_code) from e

    async def fetch_product(self, product_id: int) -> Product:
        """GET /products/{id}."""
        resp, data = await self._get_json(f"/products/{product_id}")
        if data is None:
            raise ProductNotFound(product_id)
        try:
            return Product.model_validate(data)
        except ValidationError as e:
            logger.error("Product %s failed validation: %s", product_id, e)
            raise FetchError("Catalog service sent a malformed product", status_code=resp.status_code) from e
