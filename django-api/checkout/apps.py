from django.apps import AppConfig, apps
from django.conf import settings


class CheckoutConfig(AppConfig):
    name = "checkout"

    def ready(self) -> None:
        from checkout.services import CheckoutService
        from checkout.stores import DjangoCouponStore, StripePaymentProvider, coupons_from_settings

        events = apps.get_app_config("events")
        self.coupon_store = DjangoCouponStore(
            coupons_from_settings(settings.TIKD_COUPONS), events.promo_code_store
        )
        self.payment_provider = StripePaymentProvider(settings.STRIPE_SECRET_KEY)
        self.checkout_service = CheckoutService(
            events.event_store,
            self.coupon_store,
            self.payment_provider,
            fee_per_ticket=settings.TIKD_SERVICE_FEE_PER_TICKET,
            default_currency=settings.TIKD_DEFAULT_CURRENCY,
            description=settings.TIKD_PAYMENT_DESCRIPTION,
        )
