from checkout.handlers.views import PaymentIntentView, QuoteView

__all__ = ["PaymentIntentView", "QuoteView"]
