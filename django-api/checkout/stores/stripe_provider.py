"""Stripe-backed payment provider."""

import stripe
import structlog

from checkout.domain import PaymentRequest
from checkout.domain.errors import PaymentProviderError
from checkout.stores.interfaces import PaymentProvider

logger = structlog.get_logger(__name__)


class StripePaymentProvider(PaymentProvider):
    """Creates PaymentIntents for the Payment Element."""

    def __init__(self, api_key: str, stripe_client=stripe) -> None:
        self._api_key = api_key
        self._stripe = stripe_client

    def create_payment_intent(self, request: PaymentRequest) -> str:
        params = {
            "amount": request.amount,
            "currency": request.currency.lower(),
            "description": request.description,
            "automatic_payment_methods": {"enabled": True},
            "metadata": request.metadata,
        }
        if request.receipt_email:
            params["receipt_email"] = request.receipt_email

        try:
            intent = self._stripe.PaymentIntent.create(api_key=self._api_key, **params)
        except stripe.StripeError as exc:
            logger.error(
                "payment_intent_failed",
                error=str(exc),
                error_type=type(exc).__name__,
                amount=request.amount,
                currency=request.currency,
            )
            raise PaymentProviderError(str(exc)) from exc

        logger.info("payment_intent_created", payment_intent_id=intent.id, amount=request.amount)
        return intent.client_secret
