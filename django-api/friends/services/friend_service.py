"""Friend service - the friend request lifecycle.

Accept, decline, remove and re-sending after a decline are idempotent:
when the target state already holds they report success instead of
raising, so retried client requests are harmless.
"""

from uuid import UUID

import structlog

from friends.domain import (
    Friendship,
    FriendshipStatus,
    FriendView,
    IncomingRequest,
    RequestOutcome,
    SkipReason,
    UserSummary,
)
from friends.domain.errors import (
    FriendRequestNotFoundError,
    FriendshipExistsError,
    InvalidRequestIdError,
    NoRecipientsError,
    NotRecipientError,
    SelfRequestError,
    UserEmailNotFoundError,
)
from friends.stores.interfaces import FriendshipStore, UserDirectory

logger = structlog.get_logger(__name__)

CANDIDATE_LIMIT = 25

SKIP_BY_STATUS = {
    FriendshipStatus.ACCEPTED: SkipReason.ALREADY_FRIENDS,
    FriendshipStatus.PENDING: SkipReason.ALREADY_PENDING,
}


class FriendService:
    """Service for friend requests and friend lists."""

    def __init__(self, friendships: FriendshipStore, users: UserDirectory) -> None:
        self._friendships = friendships
        self._users = users

    def send_requests(self, requester_id: int, recipient_ids: list[int]) -> list[RequestOutcome]:
        """Request friendship with each recipient independently.

        Duplicate IDs and the requester's own ID are dropped first.

        Raises:
            NoRecipientsError: If nobody is left to ask.
        """
        unique = [uid for uid in dict.fromkeys(recipient_ids) if uid != requester_id]
        if not unique:
            raise NoRecipientsError()

        known = self._users.existing_ids(unique)
        outcomes = []
        for recipient_id in unique:
            if recipient_id not in known:
                outcomes.append(RequestOutcome(recipient_id, reason=SkipReason.USER_NOT_FOUND))
                continue
            outcomes.append(self._request(requester_id, recipient_id))
        return outcomes

    def send_request_by_email(self, requester_id: int, email: str) -> RequestOutcome:
        """Request friendship with the account registered under an email.

        Raises:
            UserEmailNotFoundError: If no account uses the email.
            SelfRequestError: If the email is the requester's own.
        """
        email = email.strip().lower()
        recipient_id = self._users.find_id_by_email(email)
        if recipient_id is None:
            raise UserEmailNotFoundError()
        if recipient_id == requester_id:
            raise SelfRequestError()

        outcome = self._request(requester_id, recipient_id)
        return RequestOutcome(
            recipient_id=outcome.recipient_id,
            friendship_id=outcome.friendship_id,
            reason=outcome.reason,
            recipient_email=email,
        )

    def accept(self, friendship_id: str, acting_user_id: int) -> Friendship:
        return self._settle(friendship_id, acting_user_id, FriendshipStatus.ACCEPTED)

    def decline(self, friendship_id: str, acting_user_id: int) -> Friendship:
        return self._settle(friendship_id, acting_user_id, FriendshipStatus.DECLINED)

    def remove(self, user_id: int, other_id: int) -> None:
        """Delete the accepted edge between two users, if there is one."""
        edge = self._friendships.find_between(user_id, other_id)
        if edge is None or edge.status is not FriendshipStatus.ACCEPTED:
            return
        self._friendships.delete(edge.id)
        logger.info("friendship_removed", friendship_id=edge.id, user_id=user_id)

    def list_friends(self, user_id: int) -> list[FriendView]:
        edges = self._friendships.list_accepted(user_id)
        summaries = self._users.summaries([edge.other_party(user_id) for edge in edges])
        views = []
        for edge in edges:
            me, other = edge.canonical_pair(user_id)
            if other not in summaries:
                continue
            views.append(
                FriendView(
                    friendship_id=edge.id,
                    user_id=me,
                    friend=summaries[other],
                    created_at=edge.created_at,
                )
            )
        return views

    def list_incoming(self, user_id: int) -> list[IncomingRequest]:
        edges = self._friendships.list_incoming_pending(user_id)
        summaries = self._users.summaries([edge.requester_id for edge in edges])
        return [
            IncomingRequest(
                friendship_id=edge.id,
                sender=summaries.get(edge.requester_id, UserSummary(id=edge.requester_id, name="User")),
                created_at=edge.created_at,
            )
            for edge in edges
        ]

    def candidates(self, user_id: int, query: str = "") -> list[UserSummary]:
        """Users the caller could send a request to.

        The caller and anyone with a pending or accepted edge to them are
        left out; a declined edge can be reopened, so it does not exclude.
        """
        excluded = self._friendships.linked_user_ids(user_id) | {user_id}
        return self._users.search(query.strip(), excluded, limit=CANDIDATE_LIMIT)

    def _request(self, requester_id: int, recipient_id: int) -> RequestOutcome:
        existing = self._friendships.find_between(requester_id, recipient_id)
        if existing is None:
            try:
                created = self._friendships.create(requester_id, recipient_id)
            except FriendshipExistsError:
                # The other side won a concurrent insert; fall through to
                # classify the edge that now exists.
                existing = self._friendships.find_between(requester_id, recipient_id)
                if existing is None:
                    raise
            else:
                logger.info(
                    "friend_request_created",
                    friendship_id=created.id,
                    requester_id=requester_id,
                    recipient_id=recipient_id,
                )
                return RequestOutcome(recipient_id, friendship_id=created.id)

        reason = SKIP_BY_STATUS.get(existing.status)
        if reason is not None:
            return RequestOutcome(recipient_id, friendship_id=existing.id, reason=reason)

        reopened = self._friendships.save(existing.reopen(requester_id, recipient_id))
        logger.info(
            "friend_request_reopened",
            friendship_id=reopened.id,
            requester_id=requester_id,
            recipient_id=recipient_id,
        )
        return RequestOutcome(recipient_id, friendship_id=reopened.id)

    def _settle(
        self, friendship_id: str, acting_user_id: int, status: FriendshipStatus
    ) -> Friendship:
        try:
            UUID(str(friendship_id))
        except ValueError as exc:
            raise InvalidRequestIdError() from exc

        edge = self._friendships.get(friendship_id)
        if edge is None:
            raise FriendRequestNotFoundError()
        if edge.recipient_id != acting_user_id:
            raise NotRecipientError()

        settled = edge.settle(status)
        if settled is edge:
            return edge

        saved = self._friendships.save(settled)
        logger.info("friend_request_settled", friendship_id=saved.id, status=status.value)
        return saved
