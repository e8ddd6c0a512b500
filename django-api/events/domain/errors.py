"""Domain errors for the events module."""

from tikd.errors import ConflictError, ForbiddenError, NotFoundError, ValidationError


class EventNotFoundError(NotFoundError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__("Event not found")
        self.event_id = event_id


class InvalidEventIdError(ValidationError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__("Invalid event ID format")


class NotEventOwnerError(ForbiddenError):
    """Raised when the caller did not create the event."""

    def __init__(self) -> None:
        super().__init__("Event not yours")


class PromoCodeNotFoundError(NotFoundError):
    """Raised when a promo code does not exist for the event."""

    def __init__(self, promo_code_id: str) -> None:
        super().__init__("Promo code not found")
        self.promo_code_id = promo_code_id


class InvalidDiscountError(ValidationError):
    """Raised when a discount promo code lacks a usable mode and value."""


class DuplicatePromoCodeError(ConflictError):
    """Raised when a promo code already exists for the event."""

    def __init__(self, code: str) -> None:
        super().__init__("Code already exists for this event.")
        self.promo_code = code
