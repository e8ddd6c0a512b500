"""Checkout rejections; each maps onto one entry of the error taxonomy."""

from tikd.errors import DomainError, ErrorCode


class EmptyCartError(DomainError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.EMPTY_CART, message="Empty cart.")


class MixedCurrencyError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MIXED_CURRENCY,
            message="Mixed currencies are not supported.",
        )


class CartEventNotFoundError(DomainError):
    def __init__(self, event_id: str) -> None:
        super().__init__(code=ErrorCode.EVENT_NOT_FOUND, message="Event not found.")
        self.event_id = event_id


class TicketTypeNotFoundError(DomainError):
    def __init__(self, ticket_type_id: str) -> None:
        super().__init__(code=ErrorCode.TICKET_TYPE_NOT_FOUND, message="Ticket type not found.")
        self.ticket_type_id = ticket_type_id


class PriceDriftError(DomainError):
    """The cart is stale: the client must refresh prices before retrying."""

    def __init__(self, item_key: str) -> None:
        super().__init__(
            code=ErrorCode.PRICE_DRIFT,
            message="Ticket price changed. Please refresh.",
        )
        self.item_key = item_key


class PaymentProviderError(DomainError):
    """Upstream payment failure. Not retried automatically."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(
            code=ErrorCode.PAYMENT_PROVIDER_ERROR,
            message="Unable to create payment intent",
        )
        self.detail = detail
