"""
SQLAlchemy database models.

The products table is the only persisted state: the cart lives in the
storefront session and is never written to the database.
"""

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, Numeric, String, Text
from sqlalchemy.sql import func

from .database import Base


class Product(Base):
    """One fabric offered by the marketplace, priced per meter."""
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("gsm >= 0", name="ck_products_gsm_non_negative"),
        CheckConstraint("price_per_meter > 0", name="ck_products_price_positive"),
        CheckConstraint("stock >= 0", name="ck_products_stock_non_negative"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(255), nullable=False)
    fabric_type = Column(String(100), nullable=False, index=True)
    gsm = Column(Integer, nullable=False)
    color = Column(String(100), nullable=False, index=True)
    # asdecimal=False: the API speaks JSON numbers, not decimal strings
    price_per_meter = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    image_url = Column(Text, nullable=False, default="")

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<Product id={self.id} name={self.name!r}>"
