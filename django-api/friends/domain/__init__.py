from friends.domain.models import (
    FriendView,
    Friendship,
    FriendshipStatus,
    IncomingRequest,
    RequestOutcome,
    SkipReason,
    UserSummary,
    display_name,
)

__all__ = [
    "FriendView",
    "Friendship",
    "FriendshipStatus",
    "IncomingRequest",
    "RequestOutcome",
    "SkipReason",
    "UserSummary",
    "display_name",
]
