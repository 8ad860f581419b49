from mcp.server.fastmcp import FastMCP

from .config import (
    GSM_SLIDER_MAX,
    MCP_MESSAGE_PATH,
    MCP_SERVER_NAME,
    MCP_SSE_PATH,
    PRICE_SLIDER_MAX,
)
from .errors import FetchError, ProductNotFound
from .filters import FilterCriteria
from .logger import get_logger
from .storefront import Storefront

logger = get_logger("mcp")

FETCH_FAILED = "Could not reach the catalog, please try again"


def _product_dict(product) -> dict:
    return product.model_dump(mode="json", by_alias=True)


def register_mcp(mcp: FastMCP, storefront: Storefront):
    """MCP tool registration"""

    @mcp.tool()
    async def search_products(
        search: str = "",
        fabric_type: str = "all",
        color: str = "all",
        max_gsm: float = GSM_SLIDER_MAX,
        max_price: float = PRICE_SLIDER_MAX,
        sort_by: str = "newest",
        refresh: bool = False,
    ) -> dict:
        """Browse fabrics by name/color text, fabric type, color, max GSM and max price.
        Set refresh to reload the catalog from the server first."""
        try:
            criteria = FilterCriteria(
                search=search,
                fabric_type=fabric_type,
                color=color,
                max_gsm=max_gsm,
                max_price=max_price,
                sort=sort_by,
            )
        except ValueError as e:
            return {"success": False, "message": str(e)}

        try:
            if refresh:
                await storefront.refresh_catalog()
            result = await storefront.browse(criteria)
        except FetchError:
            logger.exception("search_products: catalog load failed")
            return {"success": False, "message": FETCH_FAILED}

        return {
            "success": True,
            "products": [_product_dict(p) for p in result.products],
            "count": len(result.products),
            "message": f"{len(result.products)} of {result.total} fabrics match",
        }

    @mcp.tool()
    async def list_facets() -> dict:
        """Fabric types and colors available in the whole catalog"""
        try:
            result = await storefront.browse()
        except FetchError:
            logger.exception("list_facets: catalog load failed")
            return {"success": False, "message": FETCH_FAILED}

        return {
            "success": True,
            "fabricTypes": result.fabric_types,
            "colors": result.colors,
        }

    @mcp.tool()
    async def get_product(productId: int) -> dict:
        """Show one fabric in detail"""
        try:
            product = await storefront.product_details(productId)
        except ProductNotFound:
            return {"success": False, "message": "Product not found"}
        except FetchError:
            logger.exception("get_product: fetch of %s failed", productId)
            return {"success": False, "message": FETCH_FAILED}

        return {"success": True, "product": _product_dict(product)}

    @mcp.tool()
    async def add_to_cart(productId: int, meters: float = 1) -> dict:
        """Add meters of a fabric to the cart"""
        # a non-positive add would shrink or drop an existing line
        if meters <= 0:
            return {
                "success": False,
                "message": "Meters must be greater than zero",
                "cart": storefront.cart_summary(),
            }

        try:
            line = await storefront.add_product(productId, meters)
        except ProductNotFound:
            return {"success": False, "message": "Product not found"}
        except FetchError:
            logger.exception("add_to_cart: fetch of %s failed", productId)
            return {"success": False, "message": FETCH_FAILED}

        return {
            "success": True,
            "message": f"{line.name} added to cart ({line.meters} m)",
            "cart": storefront.cart_summary(),
        }

    @mcp.tool()
    async def update_cart_quantity(productId: int, meters: float) -> dict:
        """Set the meters of a cart line; zero or less removes it"""
        if productId not in storefront.cart:
            return {"success": False, "message": "Product is not in the cart"}

        storefront.update_quantity(productId, meters)
        return {
            "success": True,
            "message": "Cart updated",
            "cart": storefront.cart_summary(),
        }

    @mcp.tool()
    async def remove_from_cart(productId: int) -> dict:
        """Remove a fabric from the cart"""
        if productId not in storefront.cart:
            return {"success": False, "message": "Product is not in the cart"}

        storefront.remove_from_cart(productId)
        return {
            "success": True,
            "message": "Product removed from cart",
            "cart": storefront.cart_summary(),
        }

    @mcp.tool()
    async def get_cart() -> dict:
        """Show the cart"""
        summary = storefront.cart_summary()

        if storefront.cart.is_empty:
            return {
                "isEmpty": True,
                "message": "Your cart is empty",
                "cart": summary,
            }

        return {
            "isEmpty": False,
            "message": f"{summary['lineCount']} fabrics in your cart, total {summary['totalCostFormatted']}",
            "cart": summary,
        }

    @mcp.tool()
    async def checkout() -> dict:
        """Proceed to checkout"""
        return storefront.checkout()


def create_mcp(storefront: Storefront) -> FastMCP:
    mcp = FastMCP(
        name=MCP_SERVER_NAME,
        sse_path=MCP_SSE_PATH,
        message_path=MCP_MESSAGE_PATH,
    )
    register_mcp(mcp, storefront)
    return mcp
