# app/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.api.dependencies import get_kv_store
from app.data.database import get_db
from app.domain.errors import ReviewValidationError, PersistenceError
from app.domain.schemas import ProductOut, ProductDetailOut, ReviewIn, ReviewSummaryOut
from app.repos.kv_store import KeyValueStore
from app.services.catalog_service import CatalogService
from app.services.review_service import ReviewService

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=List[ProductOut])
def list_products(db: Session = Depends(get_db)):
    return CatalogService(db).list_products()


@router.get("/{product_id}", response_model=ProductDetailOut)
def get_product(
    product_id: str,
    db: Session = Depends(get_db),
    store: KeyValueStore = Depends(get_kv_store),
):
    product = CatalogService(db).get_product_detail(product_id)
    if product is None:
        return JSONResponse(
            status_code=404,
            content={
                "detail": "Product Not Found",
                "action": {"label": "Back to Home", "href": "/"},
            },
        )

    product["review_summary"] = ReviewService(db, store).get_summary(product_id)
    return product


@router.get("/{product_id}/reviews", response_model=ReviewSummaryOut)
def list_reviews(
    product_id: str,
    db: Session = Depends(get_db),
    store: KeyValueStore = Depends(get_kv_store),
):
    return ReviewService(db, store).get_summary(product_id)


@router.post("/{product_id}/reviews", response_model=ReviewSummaryOut, status_code=201)
def submit_review(
    product_id: str,
    payload: ReviewIn,
    db: Session = Depends(get_db),
    store: KeyValueStore = Depends(get_kv_store),
):
    svc = ReviewService(db, store)
    try:
        return svc.submit_review(product_id, payload)
    except ReviewValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))
