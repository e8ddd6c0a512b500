"""Unit tests for the pricing engine.

Run with: pytest tests/test_pricing.py -v
"""

from decimal import Decimal

import pytest

from checkout.domain import CartItem, Coupon, CouponKind, calc_prices


def item(price: str, qty: int, currency: str = "USD", event_id: str = "e1") -> CartItem:
    return CartItem(event_id, f"t-{price}", Decimal(price), currency, qty)


@pytest.fixture
def cart() -> list[CartItem]:
    return [item("25.00", 2), item("15.50", 1)]


class TestCalcPrices:
    """Tests for calc_prices."""

    def test_empty_cart_is_all_zero(self):
        breakdown = calc_prices([])
        assert breakdown.currency == "USD"
        assert breakdown.subtotal == 0
        assert breakdown.fees == 0
        assert breakdown.discount == 0
        assert breakdown.total == 0
        assert breakdown.ticket_count == 0
        assert breakdown.lines == ()

    def test_no_coupon(self, cart):
        breakdown = calc_prices(cart)
        assert breakdown.subtotal == Decimal("65.50")
        assert breakdown.ticket_count == 3
        assert breakdown.fees == Decimal("5.97")
        assert breakdown.discount == Decimal("0")
        assert breakdown.total == Decimal("71.47")

    def test_flat_coupon_is_clamped_to_subtotal(self, cart):
        breakdown = calc_prices(cart, Coupon("BIG", CouponKind.FLAT, Decimal("100")))
        assert breakdown.discount == Decimal("65.50")
        assert breakdown.total == Decimal("5.97")

    def test_percent_coupon(self, cart):
        breakdown = calc_prices(cart, Coupon("OFF10", CouponKind.PERCENT, Decimal("10")))
        assert breakdown.discount == Decimal("6.55")
        assert breakdown.total == Decimal("64.92")

    def test_percent_over_100_is_clamped(self, cart):
        breakdown = calc_prices(cart, Coupon("ALL", CouponKind.PERCENT, Decimal("150")))
        assert breakdown.discount == breakdown.subtotal
        assert breakdown.total == breakdown.fees

    def test_percent_discount_is_rounded(self):
        breakdown = calc_prices([item("9.99", 1)], Coupon("P", CouponKind.PERCENT, Decimal("15")))
        # 9.99 * 15% = 1.4985
        assert breakdown.discount == Decimal("1.50")

    def test_currency_taken_from_first_item(self):
        assert calc_prices([item("10", 1, "EUR")]).currency == "EUR"

    def test_fee_can_be_configured(self, cart):
        breakdown = calc_prices(cart, fee_per_ticket=Decimal("0"))
        assert breakdown.total == breakdown.subtotal

    def test_free_tickets_still_carry_fees(self):
        breakdown = calc_prices([item("0", 2)], Coupon("F", CouponKind.FLAT, Decimal("5")))
        assert breakdown.discount == Decimal("0")
        assert breakdown.total == Decimal("3.98")

    def test_scoped_percent_coupon_uses_covered_lines(self, cart):
        coupon = Coupon("VIP", CouponKind.PERCENT, Decimal("50"), applies_to=frozenset({"e1:t-15.50"}))
        breakdown = calc_prices(cart, coupon)
        assert breakdown.discount == Decimal("7.75")
        assert breakdown.total == Decimal("63.72")

    def test_scoped_flat_coupon_is_clamped_to_covered_lines(self, cart):
        coupon = Coupon("VIP", CouponKind.FLAT, Decimal("20"), applies_to=frozenset({"e1:t-15.50"}))
        assert calc_prices(cart, coupon).discount == Decimal("15.50")

    def test_scoped_coupon_covering_nothing_gives_no_discount(self, cart):
        coupon = Coupon("VIP", CouponKind.PERCENT, Decimal("50"), applies_to=frozenset({"e2:t-1"}))
        assert calc_prices(cart, coupon).discount == Decimal("0")

    def test_single_ticket_label(self):
        breakdown = calc_prices([item("10.00", 1)])
        assert breakdown.lines[0].label == "1 Ticket"
        assert breakdown.lines[0].amount == Decimal("10.00")

    def test_plural_ticket_label(self, cart):
        assert calc_prices(cart).lines[0].label == "3 Tickets"

    @pytest.mark.parametrize(
        "kind, value",
        [
            (CouponKind.FLAT, "0.01"),
            (CouponKind.FLAT, "4.99"),
            (CouponKind.FLAT, "1000"),
            (CouponKind.PERCENT, "0"),
            (CouponKind.PERCENT, "33.33"),
            (CouponKind.PERCENT, "100"),
            (CouponKind.PERCENT, "250"),
        ],
    )
    def test_total_invariants(self, cart, kind, value):
        breakdown = calc_prices(cart, Coupon("C", kind, Decimal(value)))
        assert breakdown.discount <= breakdown.subtotal
        assert breakdown.total >= 0
        assert breakdown.total == max(breakdown.subtotal + breakdown.fees - breakdown.discount, 0)
        for amount in (breakdown.subtotal, breakdown.fees, breakdown.discount, breakdown.total):
            assert amount == amount.quantize(Decimal("0.01"))
