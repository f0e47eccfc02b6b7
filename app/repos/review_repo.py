# app/repos/review_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.data.models.review import ReviewModel


class ReviewRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_for_product(self, product_id: str) -> list[ReviewModel]:
        stmt = (
            select(ReviewModel)
            .where(ReviewModel.product_id == product_id)
            .order_by(ReviewModel.created_at.desc())
        )
        return list(self.db.execute(stmt).scalars().all())
