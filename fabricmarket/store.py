"""
Catalog Store: the product list the storefront works from.

The list is replaced as a whole on every successful load and left untouched
when a load fails. Each load is numbered; a response that arrives after a
newer load has already been applied is dropped instead of overwriting it.
"""
from typing import List, Optional, Tuple

from .client import CatalogClient
from .filters import distinct_values
from .logger import get_logger
from .schemas import Product

logger = get_logger("store")


class CatalogStore:
    def __init__(self, client: CatalogClient):
        self._client = client
        self._products: Tuple[Product, ...] = ()
        self._loaded = False
        self._issued = 0
        self._applied = 0

    @property
    def products(self) -> Tuple[Product, ...]:
        return self._products

    @property
    def loaded(self) -> bool:
        return self._loaded

    async def load(self) -> List[Product]:
        """Fetch the catalog and replace the held list.

        Raises FetchError and keeps the previous list when the fetch fails.
        """
        self._issued += 1
        generation = self._issued

        products = await self._client.fetch_products()

        if generation < self._applied:
            logger.info(
                "Dropping stale catalog response (load #%d, #%d already applied)",
                generation, self._applied,
            )
            return list(self._products)

        self._products = tuple(products)
        self._applied = generation
        self._loaded = True
        logger.info("Catalog loaded: %d products (load #%d)", len(self._products), generation)
        return list(self._products)

    def find(self, product_id: int) -> Optional[Product]:
        return next((p for p in self._products if p.id == product_id), None)

    def fabric_types(self) -> List[str]:
        return distinct_values(self._products, "fabric_type")

    def colors(self) -> List[str]:
        return distinct_values(self._products, "color")
