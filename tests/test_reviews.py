"""Tests for review aggregation and submission."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel
from app.data.models.review import ReviewModel
from app.domain.errors import ReviewValidationError, PersistenceError, StorageError
from app.domain.schemas import ReviewIn
from app.repos.kv_store import InMemoryKeyValueStore
from app.services.review_service import ReviewService, summarize, reviews_key


class FailingStore:
    def get(self, key):
        raise StorageError("redis down")

    def set(self, key, value):
        raise StorageError("redis down")


class FlakyReadStore(InMemoryKeyValueStore):
    """Pierwszy odczyt po uzbrojeniu konczy sie bledem."""

    def __init__(self):
        super().__init__()
        self.fail_next_get = False

    def get(self, key):
        if self.fail_next_get:
            self.fail_next_get = False
            raise StorageError("connection reset")
        return super().get(key)


def review(rating, id_="r"):
    return {"id": id_, "name": "A", "rating": rating, "comment": "ok", "date": "2024-01-01"}


class TestSummarize:
    def test_empty_is_zero(self):
        assert summarize([]) == {"reviews": [], "average_rating": 0, "review_count": 0}

    def test_mean_rounded_to_one_decimal(self):
        summary = summarize([review(5), review(4), review(4)])

        assert summary["average_rating"] == 4.3
        assert summary["review_count"] == 3

    def test_half_tenth_rounds_up(self):
        assert summarize([review(5), review(4), review(4), review(4)])["average_rating"] == 4.3


class TestReviewService:
    def test_builtin_reviews_when_nothing_saved(self, db_session, kv_store):
        reviews = ReviewService(db_session, kv_store).list_reviews("1")

        assert [r["name"] for r in reviews] == ["Sarah M.", "John D."]

    def test_unknown_product_has_no_reviews(self, db_session, kv_store):
        assert ReviewService(db_session, kv_store).get_summary("6")["review_count"] == 0

    def test_backend_reviews_newest_first(self, db_session, kv_store):
        now = datetime.now(timezone.utc)
        db_session.add(ProductModel(id="9", name="Vase", price=Decimal("30.00"), category="Ceramics"))
        db_session.add_all([
            ReviewModel(id="old", product_id="9", name="Ann", rating=3, comment="fine", created_at=now - timedelta(days=1)),
            ReviewModel(id="new", product_id="9", name="Bob", rating=5, comment="great", created_at=now),
        ])
        db_session.commit()

        summary = ReviewService(db_session, kv_store).get_summary("9")

        assert [r["id"] for r in summary["reviews"]] == ["new", "old"]
        assert summary["average_rating"] == 4.0

    def test_saved_reviews_take_precedence(self, db_session, kv_store):
        kv_store.set(reviews_key("1"), [review(2, "saved")])

        reviews = ReviewService(db_session, kv_store).list_reviews("1")

        assert [r["id"] for r in reviews] == ["saved"]

    def test_fetch_failures_fall_back_to_builtin(self):
        db = MagicMock(spec=Session)
        db.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))

        reviews = ReviewService(db, FailingStore()).list_reviews("2")

        assert [r["name"] for r in reviews] == ["Lisa K."]

    def test_submit_prepends_and_recomputes(self, db_session, kv_store):
        svc = ReviewService(db_session, kv_store)

        summary = svc.submit_review("1", ReviewIn(name="Eve", rating=3, comment="Nice glaze"))

        assert summary["reviews"][0]["name"] == "Eve"
        assert summary["review_count"] == 3
        assert summary["average_rating"] == 4.0
        assert kv_store.get(reviews_key("1"))[0]["comment"] == "Nice glaze"

    @pytest.mark.parametrize(
        "payload",
        [
            ReviewIn(name="Eve", rating=0, comment="Nice"),
            ReviewIn(name="Eve", rating=6, comment="Nice"),
            ReviewIn(name="", rating=4, comment="Nice"),
            ReviewIn(name="Eve", rating=4, comment="   "),
        ],
    )
    def test_incomplete_review_rejected(self, db_session, kv_store, payload):
        with pytest.raises(ReviewValidationError):
            ReviewService(db_session, kv_store).submit_review("1", payload)

        assert kv_store.get(reviews_key("1")) is None

    def test_save_failure_is_reported(self, db_session):
        with pytest.raises(PersistenceError):
            ReviewService(db_session, FailingStore()).submit_review(
                "1", ReviewIn(name="Eve", rating=5, comment="Lovely")
            )

    def test_read_failure_keeps_saved_reviews(self, db_session):
        store = FlakyReadStore()
        svc = ReviewService(db_session, store)
        svc.submit_review("6", ReviewIn(name="A", rating=5, comment="first"))
        svc.submit_review("6", ReviewIn(name="B", rating=4, comment="second"))

        store.fail_next_get = True
        with pytest.raises(PersistenceError):
            svc.submit_review("6", ReviewIn(name="C", rating=3, comment="third"))

        assert [r["name"] for r in store.get(reviews_key("6"))] == ["B", "A"]

        svc.submit_review("6", ReviewIn(name="C", rating=3, comment="third"))
        assert [r["name"] for r in store.get(reviews_key("6"))] == ["C", "B", "A"]


class TestReviewEndpoints:
    def test_get_reviews(self, client):
        resp = client.get("/products/3/reviews")

        assert resp.status_code == 200
        assert resp.json()["average_rating"] == 5.0

    def test_post_review(self, client):
        resp = client.post("/products/2/reviews", json={"name": "Tom", "rating": 3, "comment": "Solid"})

        assert resp.status_code == 201
        data = resp.json()
        assert data["review_count"] == 2
        assert data["average_rating"] == 4.0
        assert client.get("/products/2/reviews").json()["reviews"][0]["name"] == "Tom"

    def test_post_review_without_rating(self, client):
        resp = client.post("/products/2/reviews", json={"name": "Tom", "comment": "Solid"})

        assert resp.status_code == 400
        assert resp.json()["detail"] == "Please complete all fields"
