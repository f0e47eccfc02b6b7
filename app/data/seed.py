# app/data/seed.py
from datetime import datetime, timezone, timedelta

from app.data.database import SessionLocal
from app.data.catalog import BUILTIN_PRODUCTS
from app.data.models.product import ProductModel
from app.utils.logging import get_logger

logger = get_logger(__name__)


def seed(db=None):
    own_session = db is None
    db = db or SessionLocal()
    try:
        # not forcing: only seed if empty
        if db.query(ProductModel).first():
            return 0

        # created_at malejaco, zeby "najnowsze najpierw" dalo kolejnosc z katalogu
        now = datetime.now(timezone.utc)
        for idx, data in enumerate(BUILTIN_PRODUCTS):
            db.add(ProductModel(created_at=now - timedelta(minutes=idx), **data))
        db.commit()

        logger.info(f"Seeded {len(BUILTIN_PRODUCTS)} products")
        return len(BUILTIN_PRODUCTS)
    finally:
        if own_session:
            db.close()
