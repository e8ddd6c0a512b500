"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import Event, EventId, PromoCode, TicketType, TicketTypeId


class EventStore(ABC):
    """Interface for event and ticket-type lookups."""

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def get_ticket_types(self, event_id: EventId) -> dict[TicketTypeId, TicketType] | None:
        """Return the event's current ticket types keyed by ID, or None if the event is missing."""
        ...


class PromoCodeStore(ABC):
    """Interface for promo code persistence operations."""

    @abstractmethod
    def list_for_event(self, event_id: EventId) -> list[PromoCode]:
        """Return an event's promo codes ordered by created_at ascending."""
        ...

    @abstractmethod
    def create(self, event: Event, created_by_id: int, data: dict) -> PromoCode:
        """Persist a promo code.

        Raises:
            DuplicatePromoCodeError: If the code already exists for the event.
        """
        ...

    @abstractmethod
    def find_by_code(self, code: str, event_ids: list[EventId]) -> list[PromoCode]:
        """Return promo codes matching an upper-cased code across the given events."""
        ...

    @abstractmethod
    def get(self, event_id: EventId, promo_code_id: str) -> PromoCode | None:
        """Return one of an event's promo codes, or None if not found."""
        ...

    @abstractmethod
    def update(self, event_id: EventId, promo_code_id: str, changes: dict) -> PromoCode | None:
        """Apply changes to a promo code; return None if it does not exist.

        Raises:
            DuplicatePromoCodeError: If a changed code collides with another one of the event.
        """
        ...

    @abstractmethod
    def delete(self, event_id: EventId, promo_code_id: str) -> None:
        """Delete a promo code if it exists."""
        ...
