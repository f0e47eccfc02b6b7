# app/repos/product_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_in_stock(self) -> list[ProductModel]:
        stmt = (
            select(ProductModel)
            .where(ProductModel.in_stock.is_(True))
            .order_by(ProductModel.created_at.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_product(self, product_id: str) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)
