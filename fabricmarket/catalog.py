from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from .models import Product


def list_products(db: Session) -> List[Product]:
    """Whole catalog, newest first."""
    # id breaks ties between rows created within the same timestamp tick
    stmt = select(Product).order_by(Product.created_at.desc(), Product.id.desc())
    return list(db.scalars(stmt))


def get_product(db: Session, product_id: int) -> Optional[Product]:
    return db.get(Product, product_id)
