# app/services/outcome_service.py
from typing import Callable, Mapping, Dict, Any
from urllib.parse import urlencode

from app.domain.errors import StorageError
from app.repos.shipping_repo import ShippingRepo
from app.services.page_lifecycle import PageLifecycle
from app.utils.settings import SUCCESS_REDIRECT_DELAY_SECONDS
from app.utils.logging import get_logger

logger = get_logger(__name__)

SHIPPING_COMPLETE_PARAM = "shipping_complete"
SHIPPING_PAGE = "/shipping-details"

NEXT_STEPS = [
    {
        "title": "Order Processing",
        "description": "We're preparing your handcrafted item with care.",
    },
    {
        "title": "Shipping",
        "description": "Your order will ship within 3-5 business days.",
    },
    {
        "title": "Delivery",
        "description": "You'll receive tracking information by email once it ships.",
    },
]

CONTINUE_SHOPPING = {"label": "Continue Shopping", "href": "/"}
VIEW_SHIPPING = {"label": "View Shipping Details", "href": "/shipping-details/saved"}


def shipping_completed(query: Mapping[str, str]) -> bool:
    return query.get(SHIPPING_COMPLETE_PARAM) == "true"


def shipping_redirect_target(query: Mapping[str, str]) -> str:
    session_id = query.get("session_id")
    if session_id:
        return f"{SHIPPING_PAGE}?{urlencode({'session_id': session_id})}"
    return SHIPPING_PAGE


class OutcomeService:
    """Widoki koncowe platnosci: sukces (z przekierowaniem) i anulowanie."""

    def __init__(self, shipping_repo: ShippingRepo):
        self.shipping_repo = shipping_repo

    def success_view(self, query: Mapping[str, str]) -> Dict[str, Any]:
        if not shipping_completed(query):
            return {
                "state": "redirecting",
                "redirect_to": shipping_redirect_target(query),
                "redirect_after_seconds": SUCCESS_REDIRECT_DELAY_SECONDS,
            }

        try:
            shipping = self.shipping_repo.get_latest()
        except StorageError as e:
            logger.warning(f"Saved shipping details unavailable: {e}")
            shipping = None

        return {
            "state": "complete",
            "next_steps": NEXT_STEPS,
            "shipping_details": shipping,
            "actions": ([VIEW_SHIPPING] if shipping else []) + [CONTINUE_SHOPPING],
        }

    @staticmethod
    def canceled_view() -> Dict[str, Any]:
        return {
            "state": "canceled",
            "message": "No worries, your card wasn't charged. You can continue shopping and try again.",
            "actions": [CONTINUE_SHOPPING],
        }


class PaymentSuccessPage:
    """
    Strona sukcesu po stronie klienta. Bez znacznika shipping_complete
    po 2 s przechodzi do formularza wysylki; unmount anuluje timer.
    """

    def __init__(self, service: OutcomeService, lifecycle: PageLifecycle | None = None,
                 delay: float = SUCCESS_REDIRECT_DELAY_SECONDS):
        self.service = service
        self.lifecycle = lifecycle or PageLifecycle()
        self.delay = delay
        self.view: Dict[str, Any] | None = None

    def mount(self, query: Mapping[str, str], navigate: Callable[[str], None]) -> Dict[str, Any]:
        self.lifecycle.mount()
        view = self.service.success_view(query)

        def apply(result: Dict[str, Any]) -> None:
            self.view = result
            if result["state"] == "redirecting":
                target = result["redirect_to"]
                self.lifecycle.schedule(self.delay, lambda: navigate(target))
                logger.info(f"Redirecting to {target} in {self.delay}s")

        # odczyt zapisanych danych mogl sie skonczyc juz po unmount
        self.lifecycle.deliver(view, apply)
        return view

    def unmount(self) -> None:
        self.lifecycle.unmount()
