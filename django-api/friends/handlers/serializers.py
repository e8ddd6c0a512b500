"""Serializers for friend request bodies and friend list responses."""

from rest_framework import serializers


class SendRequestSerializer(serializers.Serializer):
    """Accepts either ``{"toUserIds": [...]}`` or ``{"toEmail": "..."}``."""

    toUserIds = serializers.ListField(
        child=serializers.CharField(min_length=1), min_length=1, required=False
    )
    toEmail = serializers.EmailField(required=False)

    def validate(self, attrs: dict) -> dict:
        if ("toUserIds" in attrs) == ("toEmail" in attrs):
            raise serializers.ValidationError("Provide exactly one of toUserIds or toEmail.")
        return attrs

    @staticmethod
    def user_ids(data: dict) -> list[int]:
        """Recipient IDs that look like user IDs; anything else is dropped."""
        return [int(raw) for raw in data["toUserIds"] if raw.strip().isdigit()]


class FriendSerializer(serializers.Serializer):
    id = serializers.IntegerField(source="friend.id")
    friendshipId = serializers.CharField(source="friendship_id")
    name = serializers.CharField(source="friend.name")
    email = serializers.CharField(source="friend.email")
    avatarUrl = serializers.CharField(source="friend.avatar_url")
    createdAt = serializers.DateTimeField(source="created_at", allow_null=True)


class IncomingRequestSerializer(serializers.Serializer):
    id = serializers.CharField(source="friendship_id")
    fromUserId = serializers.IntegerField(source="sender.id")
    name = serializers.CharField(source="sender.name")
    avatarUrl = serializers.CharField(source="sender.avatar_url")
    createdAt = serializers.DateTimeField(source="created_at", allow_null=True)


def outcomes_payload(outcomes) -> dict:
    """Split per-recipient outcomes into the created/skipped response body."""
    created = []
    skipped = []
    for outcome in outcomes:
        if outcome.created:
            created.append(outcome.friendship_id)
            continue
        entry = {"toUserId": outcome.recipient_id, "reason": outcome.reason.value}
        if outcome.recipient_email:
            entry["toEmail"] = outcome.recipient_email
        skipped.append(entry)
    return {"ok": True, "created": created, "skipped": skipped}


class CandidateSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    email = serializers.CharField()
    avatarUrl = serializers.CharField(source="avatar_url")
