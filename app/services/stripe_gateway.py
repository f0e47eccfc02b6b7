# app/services/stripe_gateway.py
from typing import Protocol

import stripe

from app.domain.errors import ConfigurationError
from app.utils import settings
from app.utils.logging import get_logger

logger = get_logger(__name__)


class PaymentGateway(Protocol):
    def find_customer_id(self, email: str) -> str | None:
        ...

    def create_checkout_session(self, params: dict) -> tuple[str, str]:
        """Zwraca (session_id, url)."""
        ...


class StripeGateway:
    """Hostowany checkout Stripe."""

    def __init__(self, api_key: str | None):
        if not api_key:
            logger.error("STRIPE_SECRET_KEY not found in environment")
            raise ConfigurationError("Stripe configuration error")
        self.client = stripe.StripeClient(api_key)

    @classmethod
    def from_settings(cls) -> "StripeGateway":
        return cls(settings.STRIPE_SECRET_KEY)

    def find_customer_id(self, email: str) -> str | None:
        customers = self.client.customers.list(params={"email": email, "limit": 1})
        if customers.data:
            return customers.data[0].id
        return None

    def create_checkout_session(self, params: dict) -> tuple[str, str]:
        session = self.client.checkout.sessions.create(params=params)
        return session.id, session.url
