# app/services/checkout_service.py
import json
from typing import Any, Callable

import stripe

from app.domain.schemas import CheckoutIn
from app.services.auth_client import AuthClient
from app.services.stripe_gateway import PaymentGateway, StripeGateway
from app.utils.settings import GUEST_EMAIL, ALLOWED_SHIPPING_COUNTRIES
from app.utils.logging import get_logger

logger = get_logger(__name__)


def parse_checkout_body(raw: bytes | str | None) -> CheckoutIn:
    """
    Body jest opcjonalne: zly JSON, nie-obiekt albo zly typ pola
    -> wartosc domyslna dla tego pola, nigdy blad.
    """
    defaults = CheckoutIn()
    if not raw:
        return defaults

    try:
        data = json.loads(raw)
    except (ValueError, RecursionError):
        logger.info("Unparsable checkout body, using defaults")
        return defaults

    if not isinstance(data, dict):
        return defaults

    product = data.get("product")
    amount = data.get("amount")
    currency = data.get("currency")

    return CheckoutIn(
        product=product if isinstance(product, str) and product else defaults.product,
        amount=amount if isinstance(amount, int) and not isinstance(amount, bool) and amount > 0 else defaults.amount,
        currency=currency.lower() if isinstance(currency, str) and currency else defaults.currency,
    )


def bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


class CheckoutService:
    """
    Use Case: utworzenie hostowanej sesji platnosci.

    1. ustal email kupujacego (token -> konto, inaczej gosc)
    2. uzyj istniejacego klienta Stripe dla emaila, jesli jest
    3. utworz sesje (1 pozycja, mode=payment, adres tylko z dozwolonych krajow)
    4. zwroc URL do przekierowania
    """

    def __init__(
        self,
        gateway_factory: Callable[[], PaymentGateway] = StripeGateway.from_settings,
        auth_client: AuthClient | None = None,
    ):
        self.gateway_factory = gateway_factory
        self.auth_client = auth_client or AuthClient()

    def resolve_email(self, authorization: str | None) -> str:
        token = bearer_token(authorization)
        if token is None:
            logger.info("No auth header, using guest email")
            return GUEST_EMAIL

        email = self.auth_client.get_user_email(token)
        if email:
            logger.info("User authenticated for checkout")
            return email
        return GUEST_EMAIL

    def build_session_params(self, request: CheckoutIn, origin: str, email: str, customer_id: str | None) -> dict[str, Any]:
        params: dict[str, Any] = {
            "line_items": [
                {
                    "price_data": {
                        "currency": request.currency,
                        "product_data": {"name": request.product},
                        "unit_amount": request.amount,
                    },
                    "quantity": 1,
                }
            ],
            "mode": "payment",
            "shipping_address_collection": {"allowed_countries": list(ALLOWED_SHIPPING_COUNTRIES)},
            "success_url": f"{origin}/payment-success",
            "cancel_url": f"{origin}/payment-canceled",
        }
        if customer_id:
            params["customer"] = customer_id
        else:
            params["customer_email"] = email
        return params

    def create_session(self, request: CheckoutIn, origin: str, authorization: str | None = None) -> str:
        logger.info(f"Create payment: {request.product!r} {request.amount} {request.currency}")

        # ConfigurationError leci dalej - router zamienia na 500
        gateway = self.gateway_factory()

        email = self.resolve_email(authorization)

        customer_id = None
        if email != GUEST_EMAIL:
            customer_id = gateway.find_customer_id(email)
            if customer_id:
                logger.info(f"Found existing customer {customer_id}")

        params = self.build_session_params(request, origin, email, customer_id)

        try:
            session_id, url = gateway.create_checkout_session(params)
        except stripe.StripeError as e:
            logger.error(f"Stripe error while creating checkout session: {e}")
            raise

        logger.info(f"Checkout session created: {session_id}")
        return url
