"""Checkout domain models.

Carts and coupons arrive from the client; a PriceBreakdown is always
derived by the pricing engine and never built by hand.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class CouponKind(Enum):
    FLAT = "flat"
    PERCENT = "percent"


@dataclass(frozen=True)
class CartItem:
    """One cart line: a ticket type of an event at a claimed unit price."""

    event_id: str
    ticket_type_id: str
    unit_price: Decimal
    currency: str
    qty: int
    event_title: str = ""
    ticket_label: str = ""

    def __post_init__(self) -> None:
        if self.unit_price < 0:
            raise ValueError("Unit price cannot be negative")
        if self.qty < 1:
            raise ValueError("Quantity must be positive")

    @property
    def key(self) -> str:
        return f"{self.event_id}:{self.ticket_type_id}"


@dataclass(frozen=True)
class Cart:
    items: tuple[CartItem, ...]
    coupon_code: str | None = None
    customer_email: str | None = None

    def currencies(self) -> set[str]:
        return {item.currency for item in self.items}


@dataclass(frozen=True)
class Coupon:
    """A discount descriptor resolved by code.

    applies_to holds the cart line keys the discount is computed on;
    None means the whole cart.
    """

    code: str
    kind: CouponKind
    value: Decimal
    label: str = ""
    applies_to: frozenset[str] | None = None

    def covers(self, item: CartItem) -> bool:
        return self.applies_to is None or item.key in self.applies_to


@dataclass(frozen=True)
class PriceLine:
    label: str
    amount: Decimal


@dataclass(frozen=True)
class PriceBreakdown:
    currency: str
    subtotal: Decimal
    fees: Decimal
    discount: Decimal
    total: Decimal
    ticket_count: int
    lines: tuple[PriceLine, ...] = ()


@dataclass(frozen=True)
class PaymentRequest:
    """What the payment provider is asked to charge."""

    amount: int
    currency: str
    description: str
    receipt_email: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class PaymentIntent:
    client_secret: str
    amount: int
    currency: str
    breakdown: PriceBreakdown
