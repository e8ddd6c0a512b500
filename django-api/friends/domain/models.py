"""Friendship domain models and the request lifecycle.

An edge is created ``pending`` by a request. Only its recipient may move
it to ``accepted`` or ``declined``, and only from ``pending``. A
``declined`` edge is reopened by a fresh request from either side.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum


class FriendshipStatus(Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"


class SkipReason(Enum):
    ALREADY_FRIENDS = "already_friends"
    ALREADY_PENDING = "already_pending"
    USER_NOT_FOUND = "user_not_found"


@dataclass(frozen=True)
class Friendship:
    """Domain representation of a Friendship edge."""

    id: str
    requester_id: int
    recipient_id: int
    status: FriendshipStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def other_party(self, user_id: int) -> int:
        return self.recipient_id if self.requester_id == user_id else self.requester_id

    def canonical_pair(self, user_id: int) -> tuple[int, int]:
        """Return (self, other) for the given user, whatever the stored direction."""
        return user_id, self.other_party(user_id)

    def settle(self, status: FriendshipStatus) -> "Friendship":
        """Move a pending edge to accepted/declined; settled edges are returned unchanged."""
        if self.status is not FriendshipStatus.PENDING:
            return self
        return replace(self, status=status)

    def reopen(self, requester_id: int, recipient_id: int) -> "Friendship":
        """Turn a declined edge back into a pending request from the new initiator."""
        return replace(
            self,
            requester_id=requester_id,
            recipient_id=recipient_id,
            status=FriendshipStatus.PENDING,
        )


@dataclass(frozen=True)
class UserSummary:
    id: int
    name: str
    email: str = ""
    avatar_url: str = ""


@dataclass(frozen=True)
class FriendView:
    """An accepted edge seen from one user's side."""

    friendship_id: str
    user_id: int
    friend: UserSummary
    created_at: datetime | None


@dataclass(frozen=True)
class IncomingRequest:
    friendship_id: str
    sender: UserSummary
    created_at: datetime | None


@dataclass(frozen=True)
class RequestOutcome:
    """Result of requesting friendship with one recipient."""

    recipient_id: int
    friendship_id: str | None = None
    reason: SkipReason | None = None
    recipient_email: str | None = None

    @property
    def created(self) -> bool:
        return self.reason is None


def display_name(first_name: str, last_name: str, username: str, email: str) -> str:
    full = f"{first_name or ''} {last_name or ''}".strip()
    return full or username or email or "User"
