"""Tests for cart totals, quantity updates and cart checkout."""

from decimal import Decimal

import pytest

from app.services.cart_service import (
    CartLine,
    CartService,
    clamp_stepper_quantity,
    compute_totals,
    to_minor_units,
)


def mug(quantity=1):
    return CartLine("1", "Handcrafted Ceramic Mug", Decimal("28.00"), quantity)


class TestComputeTotals:
    def test_flat_shipping_below_threshold(self):
        totals = compute_totals([mug()])

        assert totals["subtotal"] == Decimal("28.00")
        assert totals["shipping"] == Decimal("8.99")
        assert totals["total"] == Decimal("36.99")
        assert totals["free_shipping_remaining"] == Decimal("22.00")

    def test_exactly_threshold_still_pays_shipping(self):
        totals = compute_totals([CartLine("x", "Fifty", Decimal("25.00"), 2)])

        assert totals["subtotal"] == Decimal("50.00")
        assert totals["shipping"] == Decimal("8.99")

    def test_free_shipping_above_threshold(self):
        totals = compute_totals([mug(2)])

        assert totals["subtotal"] == Decimal("56.00")
        assert totals["shipping"] == Decimal("0.00")
        assert totals["total"] == totals["subtotal"]
        assert totals["free_shipping_remaining"] == Decimal("0.00")

    def test_total_is_subtotal_plus_shipping(self):
        for lines in ([], [mug()], [mug(3)], [mug(), CartLine("2", "Basket", Decimal("45.00"), 1)]):
            totals = compute_totals(lines)
            assert totals["total"] == totals["subtotal"] + totals["shipping"]

    def test_zero_quantity_lines_are_ignored(self):
        totals = compute_totals([mug(0), CartLine("2", "Basket", Decimal("45.00"), 1)])

        assert [i["product_id"] for i in totals["items"]] == ["2"]
        assert totals["subtotal"] == Decimal("45.00")


class TestCartService:
    def test_add_merges_existing_line(self):
        cart = CartService()
        cart.add("1", "Handcrafted Ceramic Mug", Decimal("28.00"), 1)
        summary = cart.add("1", "Handcrafted Ceramic Mug", Decimal("28.00"), 2)

        assert len(cart.lines) == 1
        assert summary["item_count"] == 3

    def test_update_quantity_never_negative(self):
        cart = CartService([mug(2)])
        summary = cart.update_quantity("1", -5)

        assert summary["items"] == []
        assert cart.lines == []

    def test_update_to_zero_removes(self):
        cart = CartService([mug(2), CartLine("2", "Basket", Decimal("45.00"), 1)])
        summary = cart.update_quantity("1", 0)

        assert [l.product_id for l in cart.lines] == ["2"]
        assert summary["subtotal"] == Decimal("45.00")

    def test_update_quantity_sets_value(self):
        cart = CartService([mug()])
        summary = cart.update_quantity("1", 4)

        assert summary["items"][0]["quantity"] == 4
        assert summary["items"][0]["line_total"] == Decimal("112.00")

    def test_remove_and_clear(self):
        cart = CartService([mug(), CartLine("2", "Basket", Decimal("45.00"), 1)])
        cart.remove("2")
        assert [l.product_id for l in cart.lines] == ["1"]

        cart.clear()
        assert cart.summary()["items"] == []

    def test_checkout_request_uses_total_in_cents(self):
        cart = CartService([mug(2)])
        checkout = cart.checkout_request()

        assert checkout.amount == 5600
        assert checkout.currency == "usd"
        assert checkout.product == "2 x Handcrafted Ceramic Mug"

    def test_checkout_request_includes_shipping(self):
        checkout = CartService([mug()]).checkout_request()
        assert checkout.amount == 3699

    def test_empty_cart_cannot_checkout(self):
        with pytest.raises(ValueError):
            CartService().checkout_request()


@pytest.mark.parametrize(
    "requested, expected",
    [(-1, 1), (0, 1), (1, 1), (5, 5), (10, 10), (11, 10)],
)
def test_stepper_clamps_to_one_through_ten(requested, expected):
    assert clamp_stepper_quantity(requested) == expected


def test_to_minor_units_rounds_half_up():
    assert to_minor_units(Decimal("36.99")) == 3699
    assert to_minor_units(Decimal("0.005")) == 1


class TestCartEndpoints:
    def test_summary(self, client):
        resp = client.post(
            "/cart/summary",
            json={
                "items": [
                    {"product_id": "1", "name": "Handcrafted Ceramic Mug", "price": "28.00", "quantity": 1},
                    {"product_id": "2", "name": "Woven Storage Basket", "price": "45.00", "quantity": 0},
                ]
            },
        )

        assert resp.status_code == 200
        data = resp.json()
        assert [i["product_id"] for i in data["items"]] == ["1"]
        assert Decimal(data["total"]) == Decimal("36.99")
        assert Decimal(data["shipping"]) == Decimal("8.99")

    def test_checkout_creates_session_for_whole_cart(self, client, gateway):
        resp = client.post(
            "/cart/checkout",
            json={"items": [{"product_id": "3", "name": "Live Edge Cutting Board", "price": "68.00", "quantity": 1}]},
            headers={"origin": "https://shop.example"},
        )

        assert resp.status_code == 200
        assert resp.json()["url"].startswith("https://checkout.stripe.com/")
        line = gateway.sessions[0]["line_items"][0]
        assert line["price_data"]["unit_amount"] == 6800
        assert line["quantity"] == 1

    def test_checkout_empty_cart_rejected(self, client, gateway):
        resp = client.post("/cart/checkout", json={"items": []})

        assert resp.status_code == 400
        assert gateway.sessions == []
