from django.urls import path

from checkout.handlers import PaymentIntentView, QuoteView

urlpatterns = [
    path("checkout/payment-intent", PaymentIntentView.as_view(), name="checkout-payment-intent"),
    path("checkout/quote", QuoteView.as_view(), name="checkout-quote"),
]
