from friends.services.friend_service import FriendService

__all__ = ["FriendService"]
