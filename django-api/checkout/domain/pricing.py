"""Pricing engine: subtotal, per-ticket fees, coupon discount and total.

Every intermediate monetary value is passed through round2 so the
result does not depend on the order of accumulation.
"""

from decimal import Decimal

from checkout.domain.models import CartItem, Coupon, CouponKind, PriceBreakdown, PriceLine
from checkout.domain.money import ZERO, round2

SERVICE_FEE_PER_TICKET = Decimal("1.99")
DEFAULT_CURRENCY = "USD"


def ticket_label(count: int) -> str:
    return f"{count} Ticket" if count == 1 else f"{count} Tickets"


def calc_discount(base: Decimal, coupon: Coupon | None) -> Decimal:
    """Coupon discount on the amount it covers, clamped to that amount."""
    if coupon is None:
        return ZERO
    if coupon.kind is CouponKind.FLAT:
        discount = coupon.value
    else:
        discount = base * coupon.value / 100
    return min(round2(discount), base)


def discount_base(items, coupon: Coupon | None, subtotal: Decimal) -> Decimal:
    if coupon is None or coupon.applies_to is None:
        return subtotal
    return round2(sum((item.unit_price * item.qty for item in items if coupon.covers(item)), ZERO))


def calc_prices(
    items: list[CartItem] | tuple[CartItem, ...],
    coupon: Coupon | None = None,
    fee_per_ticket: Decimal = SERVICE_FEE_PER_TICKET,
    default_currency: str = DEFAULT_CURRENCY,
) -> PriceBreakdown:
    """Price a cart. Callers must reject mixed-currency carts beforehand."""
    if not items:
        return PriceBreakdown(
            currency=default_currency,
            subtotal=ZERO,
            fees=ZERO,
            discount=ZERO,
            total=ZERO,
            ticket_count=0,
            lines=(),
        )

    currency = items[0].currency
    subtotal = round2(sum((item.unit_price * item.qty for item in items), ZERO))
    ticket_count = sum(item.qty for item in items)
    fees = round2(ticket_count * fee_per_ticket)
    discount = calc_discount(discount_base(items, coupon, subtotal), coupon)
    total = round2(max(subtotal + fees - discount, ZERO))

    return PriceBreakdown(
        currency=currency,
        subtotal=subtotal,
        fees=fees,
        discount=discount,
        total=total,
        ticket_count=ticket_count,
        lines=(PriceLine(label=ticket_label(ticket_count), amount=subtotal),),
    )
