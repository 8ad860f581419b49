from typing import Optional


class FetchError(Exception):
    """The Catalog Service could not be reached, answered non-2xx, or sent an unreadable body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ProductNotFound(LookupError):
    """No product exists with the requested id."""

    def __init__(self, product_id: int):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id
