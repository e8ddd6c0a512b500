from friends.handlers.views import (
    AcceptFriendRequestView,
    DeclineFriendRequestView,
    FriendCandidatesView,
    FriendDetailView,
    FriendListView,
    FriendRequestListView,
)

__all__ = [
    "AcceptFriendRequestView",
    "DeclineFriendRequestView",
    "FriendCandidatesView",
    "FriendDetailView",
    "FriendListView",
    "FriendRequestListView",
]
