from django.urls import path

from events.handlers import PromoCodeDetailView, PromoCodeListView

urlpatterns = [
    path(
        "events/<str:event_id>/promo-codes",
        PromoCodeListView.as_view(),
        name="promo-code-list",
    ),
    path(
        "events/<str:event_id>/promo-codes/<str:promo_code_id>",
        PromoCodeDetailView.as_view(),
        name="promo-code-detail",
    ),
]
