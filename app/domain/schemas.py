# app/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, computed_field
from pydantic.alias_generators import to_camel
from typing import List, Dict
from decimal import Decimal
from datetime import datetime

from app.utils.settings import (
    DEFAULT_CHECKOUT_PRODUCT,
    DEFAULT_CHECKOUT_AMOUNT,
    DEFAULT_CHECKOUT_CURRENCY,
)


# ---------- katalog ----------

class ProductOut(BaseModel):
    """Produkt na liscie (karta produktu)."""

    id: str
    name: str
    price: Decimal
    original_price: Decimal | None = None
    image: str
    rating: float
    reviews: int
    category: str
    in_stock: bool

    model_config = ConfigDict(from_attributes=True)

    @computed_field
    @property
    def on_sale(self) -> bool:
        return self.original_price is not None and self.original_price > self.price


class ReviewOut(BaseModel):
    id: str
    name: str
    rating: int
    comment: str
    date: str


class ReviewIn(BaseModel):
    """Nowa recenzja - kompletnosc sprawdza ReviewService, nie pydantic."""

    name: str = ""
    rating: int = 0
    comment: str = ""


class ReviewSummaryOut(BaseModel):
    reviews: List[ReviewOut]
    average_rating: float
    review_count: int


class ProductDetailOut(ProductOut):
    description: str
    images: List[str]
    features: List[str]
    specifications: Dict[str, str]
    review_summary: ReviewSummaryOut


# ---------- koszyk ----------

class CartItemIn(BaseModel):
    product_id: str = Field(..., min_length=1)
    name: str = ""
    price: Decimal = Field(..., ge=0)
    quantity: int


class CartIn(BaseModel):
    items: List[CartItemIn] = Field(default_factory=list)


class CartLineOut(BaseModel):
    product_id: str
    name: str
    price: Decimal
    quantity: int
    line_total: Decimal


class CartOut(BaseModel):
    items: List[CartLineOut]
    item_count: int
    subtotal: Decimal
    shipping: Decimal
    total: Decimal
    free_shipping_remaining: Decimal


# ---------- platnosci ----------

class CheckoutIn(BaseModel):
    product: str = DEFAULT_CHECKOUT_PRODUCT
    amount: int = Field(DEFAULT_CHECKOUT_AMOUNT, description="Kwota w centach")
    currency: str = DEFAULT_CHECKOUT_CURRENCY


class CheckoutOut(BaseModel):
    url: str


# ---------- wysylka ----------

class ShippingDetailsIn(BaseModel):
    """Formularz wysylki. JSON w camelCase (firstName, zipCode...)."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    country: str = "US"
    delivery_instructions: str = ""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ShippingDetailsOut(ShippingDetailsIn):
    order_date: datetime
    session_id: str | None = None


# ---------- strony ----------

class PageAction(BaseModel):
    label: str
    href: str


class NextStep(BaseModel):
    title: str
    description: str


class PaymentSuccessOut(BaseModel):
    state: str
    redirect_to: str | None = None
    redirect_after_seconds: float | None = None
    next_steps: List[NextStep] = Field(default_factory=list)
    shipping_details: ShippingDetailsOut | None = None
    actions: List[PageAction] = Field(default_factory=list)


class PaymentCanceledOut(BaseModel):
    state: str
    message: str
    actions: List[PageAction]


class ShippingFormOut(BaseModel):
    state: str
    form: ShippingDetailsIn
    required_fields: List[str]
    session_id: str | None = None
    error: str | None = None


class ShippingSubmitOut(BaseModel):
    state: str
    redirect_to: str
    redirect_after_seconds: float
    shipping_details: ShippingDetailsOut
