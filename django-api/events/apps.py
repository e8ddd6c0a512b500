from django.apps import AppConfig


class EventsConfig(AppConfig):
    name = "events"

    def ready(self) -> None:
        from events.services import PromoCodeService
        from events.stores import DjangoEventStore, DjangoPromoCodeStore

        self.event_store = DjangoEventStore()
        self.promo_code_store = DjangoPromoCodeStore()
        self.promo_code_service = PromoCodeService(self.event_store, self.promo_code_store)
