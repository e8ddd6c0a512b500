"""Checkout service - revalidates a cart and creates the payment intent.

This is the single place where checkout failures are classified:
- the cart must be non-empty and single-currency
- every line must match the authoritative ticket type (existence, price, currency)
- the coupon is resolved by code; an unknown code means no discount
- the total is converted to minor units once, right before the provider call
"""

import json
from decimal import Decimal

import structlog

from checkout.domain import (
    Cart,
    PaymentIntent,
    PaymentRequest,
    PriceBreakdown,
    calc_prices,
    to_minor_units,
)
from checkout.domain.errors import (
    CartEventNotFoundError,
    EmptyCartError,
    MixedCurrencyError,
    PriceDriftError,
    TicketTypeNotFoundError,
)
from checkout.domain.pricing import DEFAULT_CURRENCY, SERVICE_FEE_PER_TICKET
from checkout.stores.interfaces import CouponStore, PaymentProvider
from events.domain import EventId, TicketType, TicketTypeId
from events.stores.interfaces import EventStore

logger = structlog.get_logger(__name__)


class CheckoutService:
    """Service for cart quotes and payment-intent creation."""

    def __init__(
        self,
        events: EventStore,
        coupons: CouponStore,
        payments: PaymentProvider,
        fee_per_ticket: Decimal = SERVICE_FEE_PER_TICKET,
        default_currency: str = DEFAULT_CURRENCY,
        description: str = "Tikd order",
    ) -> None:
        self._events = events
        self._coupons = coupons
        self._payments = payments
        self._fee_per_ticket = fee_per_ticket
        self._default_currency = default_currency
        self._description = description

    def quote(self, cart: Cart) -> PriceBreakdown:
        """Validate a cart against the system of record and price it.

        Raises:
            EmptyCartError, MixedCurrencyError, CartEventNotFoundError,
            TicketTypeNotFoundError, PriceDriftError.
        """
        self._validate(cart)
        coupon = None
        if cart.coupon_code:
            lines = tuple(dict.fromkeys((item.event_id, item.ticket_type_id) for item in cart.items))
            coupon = self._coupons.find_coupon(cart.coupon_code, lines)
        return calc_prices(
            cart.items,
            coupon,
            fee_per_ticket=self._fee_per_ticket,
            default_currency=self._default_currency,
        )

    def create_payment_intent(self, cart: Cart) -> PaymentIntent:
        """Quote the cart and ask the payment provider for a payment intent.

        Raises:
            Everything quote() raises, plus PaymentProviderError.
        """
        breakdown = self.quote(cart)
        amount = to_minor_units(breakdown.total)
        request = PaymentRequest(
            amount=amount,
            currency=breakdown.currency,
            description=self._description,
            receipt_email=cart.customer_email or None,
            metadata={
                "primaryEventId": cart.items[0].event_id,
                "couponCode": cart.coupon_code or "",
                "items": json.dumps(
                    [
                        {
                            "eventId": item.event_id,
                            "ticketTypeId": item.ticket_type_id,
                            "qty": item.qty,
                            "unitPrice": str(item.unit_price),
                        }
                        for item in cart.items
                    ]
                ),
            },
        )
        client_secret = self._payments.create_payment_intent(request)
        return PaymentIntent(
            client_secret=client_secret,
            amount=amount,
            currency=breakdown.currency,
            breakdown=breakdown,
        )

    def _validate(self, cart: Cart) -> None:
        if not cart.items:
            raise EmptyCartError()
        if len(cart.currencies()) > 1:
            raise MixedCurrencyError()

        ticket_types_by_event: dict[str, dict[TicketTypeId, TicketType]] = {}
        for item in cart.items:
            if item.event_id not in ticket_types_by_event:
                ticket_types = self._load_ticket_types(item.event_id)
                if ticket_types is None:
                    raise CartEventNotFoundError(item.event_id)
                ticket_types_by_event[item.event_id] = ticket_types

            ticket_type = self._find_ticket_type(
                ticket_types_by_event[item.event_id], item.ticket_type_id
            )
            if ticket_type is None:
                raise TicketTypeNotFoundError(item.ticket_type_id)

            if ticket_type.price.amount != item.unit_price or ticket_type.currency.code != item.currency:
                logger.warning(
                    "price_drift_detected",
                    item_key=item.key,
                    claimed_price=str(item.unit_price),
                    claimed_currency=item.currency,
                    current_price=str(ticket_type.price),
                    current_currency=str(ticket_type.currency),
                )
                raise PriceDriftError(item.key)

    def _load_ticket_types(self, event_id: str) -> dict[TicketTypeId, TicketType] | None:
        try:
            parsed = EventId.from_string(event_id)
        except ValueError:
            return None
        return self._events.get_ticket_types(parsed)

    @staticmethod
    def _find_ticket_type(
        ticket_types: dict[TicketTypeId, TicketType], ticket_type_id: str
    ) -> TicketType | None:
        try:
            parsed = TicketTypeId.from_string(ticket_type_id)
        except ValueError:
            return None
        return ticket_types.get(parsed)
