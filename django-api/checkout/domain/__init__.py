from checkout.domain.models import (
    Cart,
    CartItem,
    Coupon,
    CouponKind,
    PaymentIntent,
    PaymentRequest,
    PriceBreakdown,
    PriceLine,
)
from checkout.domain.money import round2, to_minor_units
from checkout.domain.pricing import calc_prices

__all__ = [
    "Cart",
    "CartItem",
    "Coupon",
    "CouponKind",
    "PaymentIntent",
    "PaymentRequest",
    "PriceBreakdown",
    "PriceLine",
    "calc_prices",
    "round2",
    "to_minor_units",
]
