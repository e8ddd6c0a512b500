"""Serializers for promo code requests and responses."""

from decimal import Decimal

from rest_framework import serializers

FIELD_COLUMNS = {
    "name": "name",
    "description": "description",
    "code": "code",
    "kind": "kind",
    "discountMode": "discount_mode",
    "discountValue": "discount_value",
    "overallItems": "overall_items",
    "maxUses": "max_uses",
    "isActive": "is_active",
    "validFrom": "valid_from",
    "validUntil": "valid_until",
    "applicableTicketTypeIds": "applicable_ticket_type_ids",
}


class PromoCodeInputSerializer(serializers.Serializer):
    """Validates promo code bodies: POST creates, PATCH sends a partial body."""

    name = serializers.CharField(min_length=1)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    code = serializers.CharField(min_length=2, max_length=64)
    kind = serializers.ChoiceField(choices=["discount", "special_access"])
    discountMode = serializers.ChoiceField(
        choices=["percentage", "amount"], required=False, allow_null=True, default=None
    )
    discountValue = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0"), required=False, allow_null=True, default=None
    )
    overallItems = serializers.IntegerField(min_value=1, required=False, allow_null=True, default=None)
    maxUses = serializers.IntegerField(min_value=1, required=False, allow_null=True, default=None)
    isActive = serializers.BooleanField(required=False, default=True)
    validFrom = serializers.DateTimeField(required=False, allow_null=True, default=None)
    validUntil = serializers.DateTimeField(required=False, allow_null=True, default=None)
    applicableTicketTypeIds = serializers.ListField(
        child=serializers.UUIDField(), required=False, default=list
    )

    def validate(self, attrs: dict) -> dict:
        # Partial updates are checked against the stored code by the service.
        if self.partial:
            return attrs
        if attrs["kind"] == "discount":
            mode = attrs.get("discountMode")
            value = attrs.get("discountValue")
            if mode is None or value is None:
                raise serializers.ValidationError(
                    {"discountValue": "Discount value & mode are required for discounts."}
                )
            if mode == "percentage" and not (0 < value <= 100):
                raise serializers.ValidationError(
                    {"discountValue": "Percentage discount must be between 0-100."}
                )
        return attrs

    @staticmethod
    def to_domain(data: dict) -> dict:
        """Map the validated camelCase fields present onto store column names."""
        return {column: data[name] for name, column in FIELD_COLUMNS.items() if name in data}


class PromoCodeSerializer(serializers.Serializer):
    """Serializer for the PromoCode domain model."""

    id = serializers.CharField()
    eventId = serializers.CharField(source="event_id")
    name = serializers.CharField()
    description = serializers.CharField()
    code = serializers.CharField()
    kind = serializers.CharField()
    discountMode = serializers.CharField(source="discount_mode", allow_null=True)
    discountValue = serializers.DecimalField(
        source="discount_value", max_digits=10, decimal_places=2, allow_null=True, coerce_to_string=False
    )
    overallItems = serializers.IntegerField(source="overall_items", allow_null=True)
    maxUses = serializers.IntegerField(source="max_uses", allow_null=True)
    usesCount = serializers.IntegerField(source="uses_count")
    isActive = serializers.BooleanField(source="is_active")
    validFrom = serializers.DateTimeField(source="valid_from", allow_null=True)
    validUntil = serializers.DateTimeField(source="valid_until", allow_null=True)
    applicableTicketTypeIds = serializers.ListField(
        source="applicable_ticket_type_ids", child=serializers.CharField()
    )
    createdAt = serializers.DateTimeField(source="created_at")
