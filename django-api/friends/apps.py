from django.apps import AppConfig


class FriendsConfig(AppConfig):
    name = "friends"

    def ready(self) -> None:
        from friends.services import FriendService
        from friends.stores import DjangoFriendshipStore, DjangoUserDirectory

        self.friendship_store = DjangoFriendshipStore()
        self.user_directory = DjangoUserDirectory()
        self.friend_service = FriendService(self.friendship_store, self.user_directory)
