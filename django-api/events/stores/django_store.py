"""Django ORM implementation of the event and promo code stores."""

from django.db import IntegrityError, transaction

from events import models
from events.domain import (
    Capacity,
    Currency,
    Event,
    EventId,
    Money,
    PromoCode,
    TicketType,
    TicketTypeId,
)
from events.domain.errors import DuplicatePromoCodeError
from events.stores.interfaces import EventStore, PromoCodeStore


def _to_event(row: models.Event) -> Event:
    return Event(id=EventId(row.id), name=row.name, created_by_id=row.created_by_id)


def _to_ticket_type(row: models.TicketType) -> TicketType:
    return TicketType(
        id=TicketTypeId(row.id),
        event_id=EventId(row.event_id),
        name=row.name,
        price=Money(row.price),
        currency=Currency(row.currency),
        quantity=Capacity(row.quantity),
    )


def _to_promo_code(row: models.PromoCode) -> PromoCode:
    return PromoCode(
        id=str(row.id),
        event_id=EventId(row.event_id),
        name=row.name,
        description=row.description,
        code=row.code,
        kind=row.kind,
        discount_mode=row.discount_mode,
        discount_value=row.discount_value,
        overall_items=row.overall_items,
        max_uses=row.max_uses,
        uses_count=row.uses_count,
        is_active=row.is_active,
        valid_from=row.valid_from,
        valid_until=row.valid_until,
        applicable_ticket_type_ids=tuple(
            str(pk) for pk in row.applicable_ticket_types.values_list("id", flat=True)
        ),
        created_at=row.created_at,
    )


class DjangoEventStore(EventStore):
    """PostgreSQL-backed event store using Django ORM."""

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        return _to_event(row) if row else None

    def get_ticket_types(self, event_id: EventId) -> dict[TicketTypeId, TicketType] | None:
        if not models.Event.objects.filter(pk=event_id.value).exists():
            return None
        rows = models.TicketType.objects.filter(event_id=event_id.value)
        return {TicketTypeId(row.id): _to_ticket_type(row) for row in rows}


class DjangoPromoCodeStore(PromoCodeStore):
    """PostgreSQL-backed promo code store using Django ORM."""

    def list_for_event(self, event_id: EventId) -> list[PromoCode]:
        rows = models.PromoCode.objects.filter(event_id=event_id.value).order_by("created_at")
        return [_to_promo_code(row) for row in rows]

    def create(self, event: Event, created_by_id: int, data: dict) -> PromoCode:
        data = dict(data)
        ticket_type_ids = data.pop("applicable_ticket_type_ids", [])
        try:
            with transaction.atomic():
                row = models.PromoCode.objects.create(
                    event_id=event.id.value,
                    created_by_id=created_by_id,
                    **data,
                )
                if ticket_type_ids:
                    _set_applicable(row, ticket_type_ids)
        except IntegrityError as exc:
            raise DuplicatePromoCodeError(data["code"]) from exc
        return _to_promo_code(row)

    def find_by_code(self, code: str, event_ids: list[EventId]) -> list[PromoCode]:
        rows = models.PromoCode.objects.filter(
            code=code, event_id__in=[event_id.value for event_id in event_ids]
        ).order_by("created_at")
        return [_to_promo_code(row) for row in rows]

    def get(self, event_id: EventId, promo_code_id: str) -> PromoCode | None:
        row = models.PromoCode.objects.filter(pk=promo_code_id, event_id=event_id.value).first()
        return _to_promo_code(row) if row else None

    def update(self, event_id: EventId, promo_code_id: str, changes: dict) -> PromoCode | None:
        changes = dict(changes)
        ticket_type_ids = changes.pop("applicable_ticket_type_ids", None)
        try:
            with transaction.atomic():
                row = (
                    models.PromoCode.objects.select_for_update()
                    .filter(pk=promo_code_id, event_id=event_id.value)
                    .first()
                )
                if row is None:
                    return None
                for name, value in changes.items():
                    setattr(row, name, value)
                row.save()
                if ticket_type_ids is not None:
                    _set_applicable(row, ticket_type_ids)
        except IntegrityError as exc:
            raise DuplicatePromoCodeError(changes.get("code", "")) from exc
        return _to_promo_code(row)

    def delete(self, event_id: EventId, promo_code_id: str) -> None:
        models.PromoCode.objects.filter(pk=promo_code_id, event_id=event_id.value).delete()


def _set_applicable(row: models.PromoCode, ticket_type_ids: list) -> None:
    """Restrict a promo code to ticket types of its own event."""
    row.applicable_ticket_types.set(
        models.TicketType.objects.filter(event_id=row.event_id, pk__in=ticket_type_ids)
    )
