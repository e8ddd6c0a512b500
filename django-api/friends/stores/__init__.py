from friends.stores.django_store import DjangoFriendshipStore, DjangoUserDirectory
from friends.stores.interfaces import FriendshipStore, UserDirectory

__all__ = ["FriendshipStore", "UserDirectory", "DjangoFriendshipStore", "DjangoUserDirectory"]
