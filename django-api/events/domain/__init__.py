from events.domain.models import Event, PromoCode, TicketType
from events.domain.value_objects import Capacity, Currency, EventId, Money, TicketTypeId

__all__ = [
    "Event",
    "PromoCode",
    "TicketType",
    "EventId",
    "TicketTypeId",
    "Money",
    "Currency",
    "Capacity",
]
