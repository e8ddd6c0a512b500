"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from friends.domain import Friendship, UserSummary


class FriendshipStore(ABC):
    """Interface for friendship edge persistence.

    Lookups by user pair must match either stored direction.
    """

    @abstractmethod
    def get(self, friendship_id: str) -> Friendship | None:
        """Return an edge by ID, or None if not found."""
        ...

    @abstractmethod
    def find_between(self, user_a: int, user_b: int) -> Friendship | None:
        """Return the edge for the unordered pair, or None."""
        ...

    @abstractmethod
    def create(self, requester_id: int, recipient_id: int) -> Friendship:
        """Insert a pending edge.

        Raises:
            FriendshipExistsError: If the pair already has an edge.
        """
        ...

    @abstractmethod
    def save(self, friendship: Friendship) -> Friendship:
        """Persist direction and status of an existing edge."""
        ...

    @abstractmethod
    def delete(self, friendship_id: str) -> None:
        ...

    @abstractmethod
    def list_accepted(self, user_id: int) -> list[Friendship]:
        """Return accepted edges touching the user."""
        ...

    @abstractmethod
    def list_incoming_pending(self, user_id: int) -> list[Friendship]:
        """Return pending edges addressed to the user, newest first."""
        ...

    @abstractmethod
    def linked_user_ids(self, user_id: int) -> set[int]:
        """Return users sharing a pending or accepted edge with the user, in either direction."""
        ...


class UserDirectory(ABC):
    """Read-only view of user accounts."""

    @abstractmethod
    def existing_ids(self, user_ids: list[int]) -> set[int]:
        ...

    @abstractmethod
    def find_id_by_email(self, email: str) -> int | None:
        ...

    @abstractmethod
    def summaries(self, user_ids: list[int]) -> dict[int, UserSummary]:
        ...

    @abstractmethod
    def search(self, query: str, exclude_ids: set[int], limit: int = 25) -> list[UserSummary]:
        """Return users matching a case-insensitive query, minus the excluded IDs.

        An empty query matches everyone.
        """
        ...
