from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Any, Iterable, List

from app.domain.schemas import CheckoutIn
from app.utils.settings import (
    FREE_SHIPPING_THRESHOLD,
    FLAT_SHIPPING_FEE,
    STEPPER_MIN_QUANTITY,
    STEPPER_MAX_QUANTITY,
    DEFAULT_CHECKOUT_CURRENCY,
)
from app.utils.logging import get_logger

logger = get_logger(__name__)

CENTS = Decimal("0.01")


@dataclass
class CartLine:
    product_id: str
    name: str
    price: Decimal
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return (self.price * self.quantity).quantize(CENTS)


def compute_totals(items: Iterable[CartLine]) -> Dict[str, Any]:
    """
    subtotal = suma price * quantity
    shipping = 0 powyzej progu darmowej wysylki, inaczej stala oplata
    total = subtotal + shipping
    """
    lines = [i for i in items if i.quantity > 0]
    subtotal = sum((i.line_total for i in lines), Decimal("0.00"))
    shipping = Decimal("0.00") if subtotal > FREE_SHIPPING_THRESHOLD else FLAT_SHIPPING_FEE

    return {
        "items": [
            {
                "product_id": i.product_id,
                "name": i.name,
                "price": i.price,
                "quantity": i.quantity,
                "line_total": i.line_total,
            }
            for i in lines
        ],
        "item_count": sum(i.quantity for i in lines),
        "subtotal": subtotal,
        "shipping": shipping,
        "total": subtotal + shipping,
        "free_shipping_remaining": max(FREE_SHIPPING_THRESHOLD - subtotal, Decimal("0.00")),
    }


def clamp_stepper_quantity(quantity: int) -> int:
    # stepper na stronie produktu: zawsze 1..10
    return max(STEPPER_MIN_QUANTITY, min(STEPPER_MAX_QUANTITY, quantity))


def to_minor_units(amount: Decimal) -> int:
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class CartService:
    """
    Koszyk trzymany po stronie klienta - tu tylko stan w pamieci i obliczenia.
    Kolejnosc linii = kolejnosc dodawania.
    """

    def __init__(self, items: Iterable[CartLine] | None = None):
        self._lines: List[CartLine] = []
        for line in items or []:
            self.add(line.product_id, line.name, line.price, line.quantity)

    @property
    def lines(self) -> List[CartLine]:
        return list(self._lines)

    def _find(self, product_id: str) -> CartLine | None:
        for line in self._lines:
            if line.product_id == product_id:
                return line
        return None

    #commands
    def add(self, product_id: str, name: str, price: Decimal, quantity: int = 1) -> Dict[str, Any]:
        if quantity <= 0:
            return self.summary()

        existing = self._find(product_id)
        if existing:
            existing.quantity += quantity
            existing.price = price  # update ceny
        else:
            self._lines.append(CartLine(product_id, name, price, quantity))

        logger.info(f"Added {quantity} x {product_id} to cart")
        return self.summary()

    def update_quantity(self, product_id: str, quantity: int) -> Dict[str, Any]:
        quantity = max(0, quantity)
        if quantity == 0:
            return self.remove(product_id)

        line = self._find(product_id)
        if line:
            line.quantity = quantity
        return self.summary()

    def remove(self, product_id: str) -> Dict[str, Any]:
        self._lines = [l for l in self._lines if l.product_id != product_id]
        return self.summary()

    def clear(self) -> None:
        self._lines = []

    #query
    def summary(self) -> Dict[str, Any]:
        return compute_totals(self._lines)

    def checkout_request(self) -> CheckoutIn:
        """Jedna sesja platnosci na caly koszyk (razem z wysylka)."""
        totals = self.summary()
        if not totals["items"]:
            raise ValueError("Cannot checkout an empty cart")

        description = ", ".join(
            f"{i['quantity']} x {i['name'] or i['product_id']}" for i in totals["items"]
        )
        return CheckoutIn(
            product=description,
            amount=to_minor_units(totals["total"]),
            currency=DEFAULT_CHECKOUT_CURRENCY,
        )
