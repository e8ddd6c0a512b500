from events.handlers.views import PromoCodeDetailView, PromoCodeListView

__all__ = ["PromoCodeDetailView", "PromoCodeListView"]
