"""Promo code service - business logic for organizer promo codes.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from dataclasses import replace
from uuid import UUID

import structlog

from events.domain import Event, EventId, PromoCode
from events.domain.errors import (
    EventNotFoundError,
    InvalidDiscountError,
    InvalidEventIdError,
    NotEventOwnerError,
    PromoCodeNotFoundError,
)
from events.stores.interfaces import EventStore, PromoCodeStore

logger = structlog.get_logger(__name__)


def normalize_code(code: str) -> str:
    """Promo codes are stored and looked up trimmed and upper-cased."""
    return code.strip().upper()


class PromoCodeService:
    """Service for organizer promo code operations."""

    def __init__(self, events: EventStore, promo_codes: PromoCodeStore) -> None:
        self._events = events
        self._promo_codes = promo_codes

    def list_for_event(self, event_id: str, acting_user_id: int) -> list[PromoCode]:
        """Return an event's promo codes.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            NotEventOwnerError: If the caller did not create the event.
        """
        event = self._owned_event(event_id, acting_user_id)
        return self._promo_codes.list_for_event(event.id)

    def create(self, event_id: str, acting_user_id: int, data: dict) -> PromoCode:
        """Create a promo code for an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            NotEventOwnerError: If the caller did not create the event.
            DuplicatePromoCodeError: If the code already exists for the event.
        """
        event = self._owned_event(event_id, acting_user_id)
        data = {**data, "code": normalize_code(data["code"])}
        promo = self._promo_codes.create(event, acting_user_id, data)
        logger.info("promo_code_created", event_id=str(event.id), code=promo.code)
        return promo

    def get(self, event_id: str, promo_code_id: str, acting_user_id: int) -> PromoCode:
        """Return one promo code of an owned event.

        Raises:
            InvalidEventIdError, EventNotFoundError, NotEventOwnerError.
            PromoCodeNotFoundError: If the code does not belong to the event.
        """
        event = self._owned_event(event_id, acting_user_id)
        return self._existing(event, promo_code_id)

    def update(
        self, event_id: str, promo_code_id: str, acting_user_id: int, changes: dict
    ) -> PromoCode:
        """Apply a partial update to a promo code.

        The merged result must still be a valid discount when kind is discount.

        Raises:
            InvalidEventIdError, EventNotFoundError, NotEventOwnerError,
            PromoCodeNotFoundError.
            InvalidDiscountError: If the merged discount is incomplete or out of range.
            DuplicatePromoCodeError: If the new code is taken for the event.
        """
        event = self._owned_event(event_id, acting_user_id)
        current = self._existing(event, promo_code_id)
        if "code" in changes:
            changes = {**changes, "code": normalize_code(changes["code"])}
        check_discount(replace(current, **changes))

        promo = self._promo_codes.update(event.id, current.id, changes)
        if promo is None:
            raise PromoCodeNotFoundError(promo_code_id)
        logger.info("promo_code_updated", event_id=str(event.id), promo_code_id=promo.id)
        return promo

    def delete(self, event_id: str, promo_code_id: str, acting_user_id: int) -> None:
        """Delete a promo code; deleting a missing code is not an error."""
        event = self._owned_event(event_id, acting_user_id)
        if _parse_uuid(promo_code_id) is None:
            return
        self._promo_codes.delete(event.id, promo_code_id)
        logger.info("promo_code_deleted", event_id=str(event.id), promo_code_id=promo_code_id)

    def _existing(self, event: Event, promo_code_id: str) -> PromoCode:
        if _parse_uuid(promo_code_id) is None:
            raise PromoCodeNotFoundError(promo_code_id)
        promo = self._promo_codes.get(event.id, promo_code_id)
        if promo is None:
            raise PromoCodeNotFoundError(promo_code_id)
        return promo

    def _owned_event(self, event_id: str, acting_user_id: int) -> Event:
        try:
            parsed = EventId.from_string(event_id)
        except ValueError as exc:
            raise InvalidEventIdError() from exc

        event = self._events.get_event(parsed)
        if event is None:
            raise EventNotFoundError(event_id)
        if event.created_by_id != acting_user_id:
            raise NotEventOwnerError()
        return event


def check_discount(promo: PromoCode) -> None:
    """Raise InvalidDiscountError unless a discount code has a usable mode and value."""
    if promo.kind != "discount":
        return
    if promo.discount_mode is None or promo.discount_value is None:
        raise InvalidDiscountError("Discount value & mode are required for discounts.")
    if promo.discount_mode == "percentage" and not (0 < promo.discount_value <= 100):
        raise InvalidDiscountError("Percentage discount must be between 0-100.")


def _parse_uuid(value: str) -> UUID | None:
    try:
        return UUID(str(value))
    except ValueError:
        return None
