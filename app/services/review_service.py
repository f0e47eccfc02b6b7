# app/services/review_service.py
import uuid
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Any, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.data.catalog import BUILTIN_REVIEWS
from app.domain.errors import ReviewValidationError, StorageError, PersistenceError
from app.domain.schemas import ReviewIn
from app.repos.kv_store import KeyValueStore
from app.repos.review_repo import ReviewRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


def reviews_key(product_id: str) -> str:
    return f"reviews_{product_id}"


def summarize(reviews: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Srednia ocen zaokraglona do 1 miejsca, 0 gdy brak recenzji."""
    average = 0.0
    if reviews:
        mean = Decimal(sum(r["rating"] for r in reviews)) / Decimal(len(reviews))
        average = float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
    return {
        "reviews": reviews,
        "average_rating": average,
        "review_count": len(reviews),
    }


class ReviewService:
    def __init__(self, db: Session, store: KeyValueStore):
        self.repo = ReviewRepo(db)
        self.store = store

    def _from_backend(self, product_id: str) -> List[Dict[str, Any]]:
        try:
            rows = self.repo.list_for_product(product_id)
        except SQLAlchemyError as e:
            logger.warning(f"Review store unreachable for product {product_id}: {e}")
            return []
        return [
            {
                "id": r.id,
                "name": r.name,
                "rating": r.rating,
                "comment": r.comment,
                "date": r.created_at.date().isoformat(),
            }
            for r in rows
        ]

    #query
    def list_reviews(self, product_id: str) -> List[Dict[str, Any]]:
        # kolejnosc zrodel: zapisane lokalnie -> baza -> wbudowane
        try:
            saved = self.store.get(reviews_key(product_id))
        except StorageError as e:
            logger.warning(f"Saved reviews unavailable for product {product_id}: {e}")
            saved = None

        if saved is not None:
            return saved
        return self._fallback_reviews(product_id)

    def _fallback_reviews(self, product_id: str) -> List[Dict[str, Any]]:
        reviews = self._from_backend(product_id)
        if reviews:
            return reviews
        return [dict(r) for r in BUILTIN_REVIEWS.get(product_id, [])]

    def get_summary(self, product_id: str) -> Dict[str, Any]:
        return summarize(self.list_reviews(product_id))

    #commands
    def submit_review(self, product_id: str, payload: ReviewIn) -> Dict[str, Any]:
        name = payload.name.strip()
        comment = payload.comment.strip()

        if not name or not comment or not 1 <= payload.rating <= 5:
            raise ReviewValidationError()

        review = {
            "id": uuid.uuid4().hex,
            "name": name,
            "rating": payload.rating,
            "comment": comment,
            "date": date.today().isoformat(),
        }

        # blad odczytu nie moze skonczyc sie nadpisaniem zapisanych recenzji
        try:
            saved = self.store.get(reviews_key(product_id))
        except StorageError as e:
            logger.error(f"Could not read saved reviews for product {product_id}: {e}")
            raise PersistenceError("Could not save your review") from e

        if saved is None:
            saved = self._fallback_reviews(product_id)

        reviews = [review] + saved

        try:
            self.store.set(reviews_key(product_id), reviews)
        except StorageError as e:
            logger.error(f"Could not save review for product {product_id}: {e}")
            raise PersistenceError("Could not save your review") from e

        logger.info(f"Review {review['id']} added to product {product_id}")
        return summarize(reviews)
