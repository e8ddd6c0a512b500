"""Interfaces for the collaborators the checkout depends on."""

from abc import ABC, abstractmethod

from checkout.domain import Coupon, PaymentRequest


class CouponStore(ABC):
    """Coupon registry lookup."""

    @abstractmethod
    def find_coupon(self, code: str, lines: tuple[tuple[str, str], ...] = ()) -> Coupon | None:
        """Return the coupon for a code, or None when nothing matches.

        Codes are matched trimmed and upper-cased. lines are the cart's
        (event_id, ticket_type_id) pairs; event-specific promo codes only
        match, and only discount, the lines they apply to.
        """
        ...


class PaymentProvider(ABC):
    """External payment processor."""

    @abstractmethod
    def create_payment_intent(self, request: PaymentRequest) -> str:
        """Create a payment intent and return its client secret.

        Raises:
            PaymentProviderError: On any network or provider-side failure.
        """
        ...
