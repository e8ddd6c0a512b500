"""Coupon registry backed by a static table and organizer promo codes."""

from datetime import datetime
from decimal import Decimal
from typing import Callable

from django.utils import timezone

from checkout.domain import Coupon, CouponKind
from checkout.stores.interfaces import CouponStore
from events.domain import EventId, TicketTypeId
from events.services import normalize_code
from events.stores.interfaces import PromoCodeStore

PROMO_MODE_TO_KIND = {
    "percentage": CouponKind.PERCENT,
    "amount": CouponKind.FLAT,
}


def coupons_from_settings(table: dict[str, dict]) -> dict[str, Coupon]:
    """Build the static registry from ``settings.TIKD_COUPONS``."""
    return {
        normalize_code(code): Coupon(
            code=normalize_code(code),
            kind=CouponKind(entry["kind"]),
            value=Decimal(str(entry["value"])),
            label=entry.get("label", ""),
        )
        for code, entry in table.items()
    }


class DjangoCouponStore(CouponStore):
    """Resolves static coupons first, then redeemable promo codes covering cart lines."""

    def __init__(
        self,
        static_coupons: dict[str, Coupon],
        promo_codes: PromoCodeStore,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._static = static_coupons
        self._promo_codes = promo_codes
        self._clock = clock

    def find_coupon(self, code: str, lines: tuple[tuple[str, str], ...] = ()) -> Coupon | None:
        normalized = normalize_code(code)
        if not normalized:
            return None

        coupon = self._static.get(normalized)
        if coupon is not None:
            return coupon

        parsed = _parse_lines(lines)
        if not parsed:
            return None

        event_ids = list(dict.fromkeys(event_id for _, event_id, _ in parsed))
        now = self._clock()
        for promo in self._promo_codes.find_by_code(normalized, event_ids):
            if not promo.is_redeemable(now):
                continue
            covered = frozenset(
                key for key, event_id, ticket_type_id in parsed
                if promo.covers(event_id, ticket_type_id)
            )
            if covered:
                return Coupon(
                    code=promo.code,
                    kind=PROMO_MODE_TO_KIND[promo.discount_mode],
                    value=promo.discount_value,
                    label=promo.name,
                    applies_to=covered,
                )
        return None


def _parse_lines(lines) -> list[tuple[str, EventId, TicketTypeId]]:
    """Pair each cart line key with its parsed IDs, skipping malformed ones."""
    parsed = []
    for event_id, ticket_type_id in lines:
        try:
            parsed.append(
                (
                    f"{event_id}:{ticket_type_id}",
                    EventId.from_string(event_id),
                    TicketTypeId.from_string(ticket_type_id),
                )
            )
        except ValueError:
            continue
    return parsed
