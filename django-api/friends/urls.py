from django.urls import path

from friends.handlers import (
    AcceptFriendRequestView,
    DeclineFriendRequestView,
    FriendCandidatesView,
    FriendDetailView,
    FriendListView,
    FriendRequestListView,
)

urlpatterns = [
    path("friends", FriendListView.as_view(), name="friend-list"),
    path("friends/candidates", FriendCandidatesView.as_view(), name="friend-candidates"),
    path("friends/requests", FriendRequestListView.as_view(), name="friend-request-list"),
    path(
        "friends/requests/<str:request_id>/accept",
        AcceptFriendRequestView.as_view(),
        name="friend-request-accept",
    ),
    path(
        "friends/requests/<str:request_id>/decline",
        DeclineFriendRequestView.as_view(),
        name="friend-request-decline",
    ),
    path("friends/<str:user_id>", FriendDetailView.as_view(), name="friend-detail"),
]
