"""Django ORM implementation of the friendship store and user directory."""

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.db.models import Q

from friends import models
from friends.domain import Friendship, FriendshipStatus, UserSummary, display_name
from friends.domain.errors import FriendshipExistsError
from friends.stores.interfaces import FriendshipStore, UserDirectory


def _to_friendship(row: models.Friendship) -> Friendship:
    return Friendship(
        id=str(row.id),
        requester_id=row.requester_id,
        recipient_id=row.recipient_id,
        status=FriendshipStatus(row.status),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _pair(user_a: int, user_b: int) -> Q:
    return Q(requester_id=user_a, recipient_id=user_b) | Q(requester_id=user_b, recipient_id=user_a)


class DjangoFriendshipStore(FriendshipStore):
    """PostgreSQL-backed friendship store using Django ORM."""

    def get(self, friendship_id: str) -> Friendship | None:
        row = models.Friendship.objects.filter(pk=friendship_id).first()
        return _to_friendship(row) if row else None

    def find_between(self, user_a: int, user_b: int) -> Friendship | None:
        row = models.Friendship.objects.filter(_pair(user_a, user_b)).first()
        return _to_friendship(row) if row else None

    def create(self, requester_id: int, recipient_id: int) -> Friendship:
        try:
            with transaction.atomic():
                row = models.Friendship.objects.create(
                    requester_id=requester_id,
                    recipient_id=recipient_id,
                    status=models.Friendship.Status.PENDING,
                )
        except IntegrityError as exc:
            raise FriendshipExistsError() from exc
        return _to_friendship(row)

    def save(self, friendship: Friendship) -> Friendship:
        row = models.Friendship.objects.get(pk=friendship.id)
        row.requester_id = friendship.requester_id
        row.recipient_id = friendship.recipient_id
        row.status = friendship.status.value
        row.save(update_fields=["requester", "recipient", "status", "updated_at"])
        return _to_friendship(row)

    def delete(self, friendship_id: str) -> None:
        models.Friendship.objects.filter(pk=friendship_id).delete()

    def list_accepted(self, user_id: int) -> list[Friendship]:
        rows = models.Friendship.objects.filter(
            Q(requester_id=user_id) | Q(recipient_id=user_id),
            status=models.Friendship.Status.ACCEPTED,
        ).order_by("-updated_at")
        return [_to_friendship(row) for row in rows]

    def list_incoming_pending(self, user_id: int) -> list[Friendship]:
        rows = models.Friendship.objects.filter(
            recipient_id=user_id, status=models.Friendship.Status.PENDING
        ).order_by("-created_at")
        return [_to_friendship(row) for row in rows]

    def linked_user_ids(self, user_id: int) -> set[int]:
        rows = models.Friendship.objects.filter(
            Q(requester_id=user_id) | Q(recipient_id=user_id),
            status__in=[models.Friendship.Status.PENDING, models.Friendship.Status.ACCEPTED],
        ).values_list("requester_id", "recipient_id")
        return {other for pair in rows for other in pair if other != user_id}


def _to_summary(user) -> UserSummary:
    return UserSummary(
        id=user.pk,
        name=display_name(
            getattr(user, "first_name", ""),
            getattr(user, "last_name", ""),
            user.get_username(),
            getattr(user, "email", ""),
        ),
        email=getattr(user, "email", "") or "",
    )


class DjangoUserDirectory(UserDirectory):
    """User lookups against the configured auth user model."""

    SEARCH_FIELDS = ("email", "username", "first_name", "last_name")

    def existing_ids(self, user_ids: list[int]) -> set[int]:
        return set(get_user_model().objects.filter(pk__in=user_ids).values_list("pk", flat=True))

    def find_id_by_email(self, email: str) -> int | None:
        return (
            get_user_model()
            .objects.filter(email__iexact=email)
            .values_list("pk", flat=True)
            .first()
        )

    def summaries(self, user_ids: list[int]) -> dict[int, UserSummary]:
        users = get_user_model().objects.filter(pk__in=user_ids)
        return {user.pk: _to_summary(user) for user in users}

    def search(self, query: str, exclude_ids: set[int], limit: int = 25) -> list[UserSummary]:
        users = get_user_model().objects.exclude(pk__in=exclude_ids)
        if query:
            match = Q()
            for name in self.SEARCH_FIELDS:
                match |= Q(**{f"{name}__icontains": query})
            users = users.filter(match)
        return [_to_summary(user) for user in users.order_by("pk")[:limit]]
