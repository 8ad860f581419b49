from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .catalog import get_product, list_products
from .database import get_db
from .logger import get_logger
from .schemas import ErrorBody, Product

logger = get_logger("routes")


def register_api_routes(app):

    # ---------------------------------------------------
    # CATALOG SERVICE (read-only)
    # ---------------------------------------------------
    router = APIRouter(prefix="/products", tags=["catalog"])

    # 1) Full catalog, newest first
    @router.get(
        "",
        response_model=List[Product],
        responses={500: {"model": ErrorBody}},
    )
    def list_products_endpoint(db: Session = Depends(get_db)):
        try:
            rows = list_products(db)
        except SQLAlchemyError:
            logger.exception("Listing products failed")
            return JSONResponse({"error": "Failed to fetch products"}, status_code=500)
        return [Product.model_validate(row) for row in rows]

    # 2) Single product
    @router.get(
        "/{product_id}",
        response_model=Product,
        responses={404: {"model": ErrorBody}, 500: {"model": ErrorBody}},
    )
    def get_product_endpoint(product_id: int, db: Session = Depends(get_db)):
        try:
            row = get_product(db, product_id)
        except SQLAlchemyError:
            logger.exception("Fetching product %s failed", product_id)
            return JSONResponse({"error": "Failed to fetch product"}, status_code=500)

        if row is None:
            return JSONResponse({"error": "Product not found"}, status_code=404)

        return Product.model_validate(row)

    app.include_router(router)
