# app/api/routers/cart.py
from fastapi import APIRouter, Depends, HTTPException, Request

from app.api.routers.payments import checkout_response, get_checkout_service
from app.domain.schemas import CartIn, CartOut, CheckoutOut
from app.services.cart_service import CartService
from app.services.checkout_service import CheckoutService

router = APIRouter(prefix="/cart", tags=["cart"])


def build_cart(payload: CartIn) -> CartService:
    cart = CartService()
    for item in payload.items:
        cart.add(item.product_id, item.name, item.price, item.quantity)
    return cart


@router.post("/summary", response_model=CartOut)
def cart_summary(payload: CartIn):
    """Sumy koszyka. Linie z iloscia <= 0 traktowane jak usuniete."""
    return build_cart(payload).summary()


@router.post("/checkout", response_model=CheckoutOut)
def cart_checkout(
    payload: CartIn,
    request: Request,
    svc: CheckoutService = Depends(get_checkout_service),
):
    cart = build_cart(payload)
    try:
        checkout = cart.checkout_request()
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return checkout_response(svc, checkout, request)
