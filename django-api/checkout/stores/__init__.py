from checkout.stores.coupons import DjangoCouponStore, coupons_from_settings
from checkout.stores.interfaces import CouponStore, PaymentProvider
from checkout.stores.stripe_provider import StripePaymentProvider

__all__ = [
    "CouponStore",
    "PaymentProvider",
    "DjangoCouponStore",
    "StripePaymentProvider",
    "coupons_from_settings",
]
