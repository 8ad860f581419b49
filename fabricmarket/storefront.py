"""
Storefront session: the catalog, the filter pipeline and the cart of one
shopper, wired together.

Every collaborator is passed in at construction, so there is no way to reach
a cart that was never created.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from .cart import CartLine, CartStore, build_cart_summary
from .client import CatalogClient
from .filters import FilterCriteria, apply_filters
from .logger import get_logger
from .schemas import Product
from .store import CatalogStore

logger = get_logger("storefront")


@dataclass
class BrowseResult:
    products: List[Product]
    fabric_types: List[str] = field(default_factory=list)
    colors: List[str] = field(default_factory=list)
    total: int = 0


class Storefront:
    def __init__(self, client: CatalogClient, catalog: CatalogStore, cart: CartStore):
        self.client = client
        self.catalog = catalog
        self.cart = cart

    async def refresh_catalog(self) -> List[Product]:
        return await self.catalog.load()

    async def browse(self, criteria: FilterCriteria = FilterCriteria()) -> BrowseResult:
        if not self.catalog.loaded:
            await self.catalog.load()

        products = self.catalog.products
        visible = apply_filters(products, criteria)
        return BrowseResult(
            products=visible,
            fabric_types=self.catalog.fabric_types(),
            colors=self.catalog.colors(),
            total=len(products),
        )

    async def product_details(self, product_id: int) -> Product:
        return await self.client.fetch_product(product_id)

    async def add_product(self, product_id: int, meters: float = 1) -> Optional[CartLine]:
        """Add `meters` of a product, snapshotting its name, price and image now."""
        product = await self.client.fetch_product(product_id)
        self.cart.add_to_cart(CartLine(
            product_id=product.id,
            name=product.name,
            price_per_meter=product.price_per_meter,
            meters=meters,
            image_url=product.image_url,
        ))
        logger.debug("Added %s m of product %s", meters, product_id)
        return self.cart.get(product_id)

    def update_quantity(self, product_id: int, meters: float) -> None:
        self.cart.update_quantity(product_id, meters)

    def remove_from_cart(self, product_id: int) -> None:
        self.cart.remove_from_cart(product_id)

    def cart_summary(self) -> dict:
        return build_cart_summary(self.cart)

    def checkout(self) -> dict:
        # Payment is not wired up; the cart is left as it is.
        summary = self.cart_summary()
        if self.cart.is_empty:
            return {"success": False, "message": "Your cart is empty", "cart": summary}
        return {
            "success": False,
            "message": f"Checkout is not available yet. Cart total: {summary['totalCostFormatted']}",
            "cart": summary,
        }


def create_storefront(client: CatalogClient = None) -> Storefront:
    client = client or CatalogClient()
    return Storefront(client=client, catalog=CatalogStore(client), cart=CartStore())
