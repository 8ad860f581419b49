"""Populate the products table with the example catalog.

    python -m fabricmarket.seed
"""
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from .database import SessionLocal, init_db
from .logger import get_logger
from .models import Product

logger = get_logger("seed")

SEED_PRODUCTS = [
    {
        "name": "Premium Cotton Fabric",
        "fabric_type": "Cotton",
        "gsm": 150,
        "color": "White",
        "price_per_meter": 250,
        "stock": 100,
        "image_url": "https://images.unsplash.com/photo-1586105251261-72a756497a11?w=400",
    },
    {
        "name": "Silk Blend Fabric",
        "fabric_type": "Silk",
        "gsm": 120,
        "color": "Cream",
        "price_per_meter": 850,
        "stock": 50,
        "image_url": "https://images.unsplash.com/photo-1519631128182-433895475ffe?w=400",
    },
    {
        "name": "Denim Blue Fabric",
        "fabric_type": "Denim",
        "gsm": 300,
        "color": "Blue",
        "price_per_meter": 450,
        "stock": 75,
        "image_url": "https://images.unsplash.com/photo-1582418702059-97ebafb35d09?w=400",
    },
    {
        "name": "Linen Natural Fabric",
        "fabric_type": "Linen",
        "gsm": 180,
        "color": "Beige",
        "price_per_meter": 550,
        "stock": 60,
        "image_url": "https://images.unsplash.com/photo-1558769132-cb1aea579296?w=400",
    },
    {
        "name": "Polyester Red Fabric",
        "fabric_type": "Polyester",
        "gsm": 140,
        "color": "Red",
        "price_per_meter": 200,
        "stock": 120,
        "image_url": "https://images.unsplash.com/photo-1582735689318-b97e5d1f1b8a?w=400",
    },
    {
        "name": "Wool Blend Grey",
        "fabric_type": "Wool",
        "gsm": 250,
        "color": "Grey",
        "price_per_meter": 750,
        "stock": 40,
        "image_url": "https://images.unsplash.com/photo-1610726138377-edf7a7cb9cb4?w=400",
    },
    {
        "name": "Cotton Black Fabric",
        "fabric_type": "Cotton",
        "gsm": 160,
        "color": "Black",
        "price_per_meter": 280,
        "stock": 90,
        "image_url": "https://images.unsplash.com/photo-1528642474498-1af0c17fd8c3?w=400",
    },
    {
        "name": "Silk Purple Fabric",
        "fabric_type": "Silk",
        "gsm": 110,
        "color": "Purple",
        "price_per_meter": 900,
        "stock": 30,
        "image_url": "https://images.unsplash.com/photo-1567401893414-76b7b1e5a7a5?w=400",
    },
    {
        "name": "Denim Dark Blue",
        "fabric_type": "Denim",
        "gsm": 320,
        "color": "Navy",
        "price_per_meter": 480,
        "stock": 65,
        "image_url": "https://images.unsplash.com/photo-1495105787522-5334e3ffa0ef?w=400",
    },
    {
        "name": "Linen White Fabric",
        "fabric_type": "Linen",
        "gsm": 170,
        "color": "White",
        "price_per_meter": 520,
        "stock": 55,
        "image_url": "https://images.unsplash.com/photo-1604522733973-2e1d1a84f326?w=400",
    },
]


def seed_products(db: Session) -> int:
    """Insert the example catalog into an empty table. Returns the number of rows added."""
    existing = db.scalar(select(func.count()).select_from(Product))
    if existing:
        logger.info("Products table already holds %d rows, skipping seed", existing)
        return 0

    for data in SEED_PRODUCTS:
        db.add(Product(**data))
    db.commit()

    logger.info("Seeded %d products successfully!", len(SEED_PRODUCTS))
    return len(SEED_PRODUCTS)


def main():
    init_db()
    db = SessionLocal()
    try:
        seed_products(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
