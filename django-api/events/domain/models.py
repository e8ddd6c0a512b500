"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from events.domain.value_objects import Capacity, Currency, EventId, Money, TicketTypeId


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    created_by_id: int


@dataclass(frozen=True)
class TicketType:
    """The system of record's current price and currency for a ticket type."""

    id: TicketTypeId
    event_id: EventId
    name: str
    price: Money
    currency: Currency
    quantity: Capacity


@dataclass(frozen=True)
class PromoCode:
    """Domain representation of an organizer promo code."""

    id: str
    event_id: EventId
    name: str
    description: str
    code: str
    kind: str
    discount_mode: str | None
    discount_value: Decimal | None
    overall_items: int | None
    max_uses: int | None
    uses_count: int
    is_active: bool
    valid_from: datetime | None
    valid_until: datetime | None
    applicable_ticket_type_ids: tuple[str, ...]
    created_at: datetime

    def is_redeemable(self, now: datetime) -> bool:
        """True when the code can currently be applied as a discount."""
        if not self.is_active or self.kind != "discount":
            return False
        if self.discount_mode is None or self.discount_value is None:
            return False
        if self.valid_from is not None and now < self.valid_from:
            return False
        if self.valid_until is not None and now > self.valid_until:
            return False
        if self.max_uses is not None and self.uses_count >= self.max_uses:
            return False
        return True

    def covers(self, event_id: EventId, ticket_type_id: TicketTypeId) -> bool:
        """True when a ticket type of an event falls under this code.

        An empty applicable set means every ticket type of the event.
        """
        if event_id != self.event_id:
            return False
        if not self.applicable_ticket_type_ids:
            return True
        return str(ticket_type_id) in self.applicable_ticket_type_ids
