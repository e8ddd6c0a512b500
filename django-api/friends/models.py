"""Django ORM models (persistence layer) for friendships."""

import uuid

from django.conf import settings
from django.db import models
from django.db.models.functions import Greatest, Least


class Friendship(models.Model):
    """One relationship edge between two users.

    The unique constraint is over the unordered pair, so (a, b) and
    (b, a) can never both exist.
    """

    class Status(models.TextChoices):
        PENDING = "pending"
        ACCEPTED = "accepted"
        DECLINED = "declined"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    requester = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="sent_friendships"
    )
    recipient = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="received_friendships"
    )
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.PENDING)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                Least("requester", "recipient"),
                Greatest("requester", "recipient"),
                name="uniq_friendship_pair",
            ),
            models.CheckConstraint(
                condition=~models.Q(requester=models.F("recipient")),
                name="friendship_not_self",
            ),
        ]
        indexes = [
            models.Index(fields=["recipient", "status"], name="friendship_recipient_idx"),
            models.Index(fields=["requester", "status"], name="friendship_requester_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.requester_id} -> {self.recipient_id} ({self.status})"
