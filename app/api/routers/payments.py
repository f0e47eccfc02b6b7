# app/api/routers/payments.py
from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from app.domain.errors import ConfigurationError
from app.domain.schemas import CheckoutIn
from app.services.checkout_service import CheckoutService, parse_checkout_body
from app.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["payments"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def get_checkout_service() -> CheckoutService:
    return CheckoutService()


def checkout_response(svc: CheckoutService, checkout: CheckoutIn, request: Request) -> JSONResponse:
    # sesja musi byc w pelni utworzona zanim zwrocimy URL do przekierowania
    try:
        url = svc.create_session(
            checkout,
            origin=request.headers.get("origin", ""),
            authorization=request.headers.get("authorization"),
        )
    except ConfigurationError as e:
        return JSONResponse(status_code=500, content={"error": str(e)}, headers=CORS_HEADERS)
    except Exception as e:
        logger.error(f"Error in create-payment: {e}")
        return JSONResponse(status_code=500, content={"error": str(e)}, headers=CORS_HEADERS)

    return JSONResponse(content={"url": url}, headers=CORS_HEADERS)


@router.options("/create-payment")
def create_payment_preflight():
    return Response(status_code=200, headers=CORS_HEADERS)


@router.post("/create-payment")
async def create_payment(request: Request, svc: CheckoutService = Depends(get_checkout_service)):
    """
    Tworzy hostowana sesje Stripe i zwraca {"url": ...}.
    Body opcjonalne - zle body = wartosci domyslne.
    """
    checkout = parse_checkout_body(await request.body())
    return await run_in_threadpool(checkout_response, svc, checkout, request)
