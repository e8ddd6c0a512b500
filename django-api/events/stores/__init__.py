from events.stores.django_store import DjangoEventStore, DjangoPromoCodeStore
from events.stores.interfaces import EventStore, PromoCodeStore

__all__ = ["EventStore", "PromoCodeStore", "DjangoEventStore", "DjangoPromoCodeStore"]
