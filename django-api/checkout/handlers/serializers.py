"""Serializers for checkout requests and price breakdown responses."""

from decimal import Decimal

from rest_framework import serializers

from checkout.domain import Cart, CartItem


class CartItemSerializer(serializers.Serializer):
    """One cart line; a supplied key must agree with the event and ticket type IDs."""

    key = serializers.CharField(required=False, allow_blank=True)
    eventId = serializers.CharField()
    eventTitle = serializers.CharField(required=False, allow_blank=True, default="")
    ticketTypeId = serializers.CharField()
    ticketLabel = serializers.CharField(required=False, allow_blank=True, default="")
    unitPrice = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0"))
    currency = serializers.RegexField(r"^[A-Za-z]{3}$")
    qty = serializers.IntegerField(min_value=1)

    def validate(self, attrs: dict) -> dict:
        key = attrs.pop("key", "")
        if key and key != f"{attrs['eventId']}:{attrs['ticketTypeId']}":
            raise serializers.ValidationError({"key": "Key must be <eventId>:<ticketTypeId>."})
        return attrs


class CartSerializer(serializers.Serializer):
    """Validates the checkout body: items plus optional coupon code and email."""

    items = CartItemSerializer(many=True, allow_empty=True)
    couponCode = serializers.CharField(required=False, allow_null=True, allow_blank=True, default=None)
    customerEmail = serializers.EmailField(required=False, allow_null=True, allow_blank=True, default=None)

    @staticmethod
    def to_domain(data: dict) -> Cart:
        return Cart(
            items=tuple(
                CartItem(
                    event_id=item["eventId"],
                    ticket_type_id=item["ticketTypeId"],
                    unit_price=item["unitPrice"],
                    currency=item["currency"].upper(),
                    qty=item["qty"],
                    event_title=item["eventTitle"],
                    ticket_label=item["ticketLabel"],
                )
                for item in data["items"]
            ),
            coupon_code=data["couponCode"] or None,
            customer_email=data["customerEmail"] or None,
        )


class PriceLineSerializer(serializers.Serializer):
    label = serializers.CharField()
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, coerce_to_string=False)


class PriceBreakdownSerializer(serializers.Serializer):
    """Serializer for the PriceBreakdown domain model."""

    currency = serializers.CharField()
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, coerce_to_string=False)
    fees = serializers.DecimalField(max_digits=12, decimal_places=2, coerce_to_string=False)
    discount = serializers.DecimalField(max_digits=12, decimal_places=2, coerce_to_string=False)
    total = serializers.DecimalField(max_digits=12, decimal_places=2, coerce_to_string=False)
    ticketCount = serializers.IntegerField(source="ticket_count")
    lines = PriceLineSerializer(many=True)
