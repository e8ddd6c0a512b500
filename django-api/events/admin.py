from django.contrib import admin

from events.models import Event, PromoCode, TicketType


class TicketTypeInline(admin.TabularInline):
    model = TicketType
    extra = 1


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "location", "created_by", "created_at"]
    search_fields = ["name", "location"]
    inlines = [TicketTypeInline]


@admin.register(TicketType)
class TicketTypeAdmin(admin.ModelAdmin):
    list_display = ["name", "event", "price", "currency", "quantity"]
    list_filter = ["event"]


@admin.register(PromoCode)
class PromoCodeAdmin(admin.ModelAdmin):
    list_display = ["code", "event", "kind", "discount_mode", "discount_value", "uses_count", "is_active"]
    list_filter = ["kind", "is_active"]
    search_fields = ["code", "name"]
