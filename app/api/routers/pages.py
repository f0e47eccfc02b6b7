# app/api/routers/pages.py
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic.alias_generators import to_camel

from app.api.dependencies import get_kv_store
from app.domain.errors import ShippingValidationError, PersistenceError, StorageError
from app.domain.schemas import (
    PaymentSuccessOut,
    PaymentCanceledOut,
    ShippingDetailsIn,
    ShippingDetailsOut,
    ShippingFormOut,
    ShippingSubmitOut,
)
from app.repos.kv_store import KeyValueStore
from app.repos.shipping_repo import ShippingRepo
from app.services.outcome_service import OutcomeService
from app.services.shipping_service import (
    ShippingCapture,
    CaptureState,
    REQUIRED_FIELDS,
    COMPLETED_REDIRECT,
)
from app.utils.settings import SHIPPING_REDIRECT_DELAY_SECONDS

router = APIRouter(tags=["checkout pages"])


def get_shipping_repo(store: KeyValueStore = Depends(get_kv_store)) -> ShippingRepo:
    return ShippingRepo(store)


@router.get("/payment-success", response_model=PaymentSuccessOut)
def payment_success(request: Request, repo: ShippingRepo = Depends(get_shipping_repo)):
    return OutcomeService(repo).success_view(request.query_params)


@router.get("/payment-canceled", response_model=PaymentCanceledOut)
def payment_canceled():
    return OutcomeService.canceled_view()


@router.get("/shipping-details", response_model=ShippingFormOut)
def shipping_form(session_id: str | None = None):
    return {
        "state": CaptureState.COLLECTING.value,
        "form": ShippingDetailsIn(),
        "required_fields": [to_camel(f) for f in REQUIRED_FIELDS],
        "session_id": session_id,
    }


@router.post("/shipping-details", response_model=ShippingSubmitOut)
def submit_shipping(
    payload: ShippingDetailsIn,
    session_id: str | None = None,
    repo: ShippingRepo = Depends(get_shipping_repo),
):
    capture = ShippingCapture(repo, session_id=session_id, form=payload)
    try:
        record = capture.submit()
    except ShippingValidationError as e:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(e),
                "description": capture.error,
                "missing_fields": [to_camel(f) for f in e.missing_fields],
                "state": capture.state.value,
            },
        )
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))

    return {
        "state": capture.state.value,
        "redirect_to": COMPLETED_REDIRECT,
        "redirect_after_seconds": SHIPPING_REDIRECT_DELAY_SECONDS,
        "shipping_details": record,
    }


@router.get("/shipping-details/saved", response_model=ShippingDetailsOut)
def saved_shipping(repo: ShippingRepo = Depends(get_shipping_repo)):
    try:
        record = repo.get_latest()
    except StorageError as e:
        raise HTTPException(status_code=503, detail=str(e))

    if record is None:
        raise HTTPException(status_code=404, detail="No shipping details saved")
    return record
